import asyncio
import json
import logging
from typing import Any, Optional
from xml.etree import ElementTree

import click
from rich.console import Console

from .._config import Config
from .._cookie_store import HttpxCookieStore
from .._request_client import RequestClient
from .._transport import HttpxTransport
from .._utils._logs import setup_logging
from ..models.errors import InvalidRequestError, RequestFailure

logger = logging.getLogger(__name__)
console = Console()


def _parse_data(pairs: tuple[str, ...]) -> Optional[dict[str, str]]:
    if not pairs:
        return None
    data = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"Expected key=value, got '{pair}'", param_hint="--data"
            )
        data[key] = value
    return data


def _render_body(body: Any) -> str:
    if isinstance(body, ElementTree.Element):
        return ElementTree.tostring(body, encoding="unicode")
    if isinstance(body, bytes):
        return body.decode(errors="replace")
    if isinstance(body, str):
        return body
    return json.dumps(body, indent=2)


async def _send(options: dict[str, Any], session_cookie: Optional[str], config: Config):
    outcome: dict[str, Any] = {}

    def on_success(body, status_text, raw):
        outcome["body"] = body

    def on_error(failure: RequestFailure):
        outcome["failure"] = failure

    async with HttpxTransport(config=config) as transport:
        client = RequestClient.create(
            {**options, "success": on_success, "error": on_error},
            {"session_cookie_name": session_cookie or config.session_cookie_name},
            transport=transport,
            cookie_store=HttpxCookieStore(transport.cookies),
        )
        client.send()
    return outcome, client.attempt_count


@click.command()
@click.argument("url")
@click.option("--username", "-u", default=None, help="Username for basic auth")
@click.option("--password", "-p", default=None, help="Password for basic auth")
@click.option(
    "--data-type",
    default="json",
    show_default=True,
    help="Expected response type, sent as Accept: application/<data-type>",
)
@click.option("--method", "-X", default="GET", show_default=True)
@click.option(
    "--data", "-d", "data", multiple=True, help="Request data as key=value"
)
@click.option(
    "--session-cookie",
    default=None,
    help="Cookie to clear and retry once with on an authentication failure",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def send(
    url: str,
    username: Optional[str],
    password: Optional[str],
    data_type: str,
    method: str,
    data: tuple[str, ...],
    session_cookie: Optional[str],
    verbose: bool,
) -> None:
    """Send a request to URL and print the response."""
    setup_logging(verbose)
    config = Config.from_env()
    options = {
        "url": url,
        "username": username,
        "password": password,
        "data_type": data_type,
        "method": method,
        "data": _parse_data(data),
    }

    try:
        outcome, attempts = asyncio.run(_send(options, session_cookie, config))
    except InvalidRequestError as e:
        raise click.UsageError(e.message) from e

    logger.debug(f"Finished after {attempts} attempt(s)")
    if "failure" in outcome:
        console.print(f"[red]Request failed:[/red] {outcome['failure']}")
        raise click.exceptions.Exit(1)
    console.print(_render_body(outcome.get("body")), markup=False)
