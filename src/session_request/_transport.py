import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Callable, Optional, Protocol, runtime_checkable
from xml.etree import ElementTree

from httpx import (
    AsyncClient,
    BasicAuth,
    Cookies,
    Response,
    TimeoutException,
)

from ._config import Config
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import (
    STATUS_TEXT_ERROR,
    STATUS_TEXT_PARSER_ERROR,
    STATUS_TEXT_SUCCESS,
    STATUS_TEXT_TIMEOUT,
)

logger = getLogger(__name__)


class HeaderSetter:
    """Collects the headers set from a ``before_send`` hook."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}

    def set_request_header(self, name: str, value: str) -> None:
        self.headers[name] = value


@dataclass
class TransportParams:
    """Everything a transport needs for one dispatch.

    ``username``, ``password`` and ``data`` are ``None`` when they are not
    part of the request; transports must omit them entirely in that case.
    """

    url: str
    data_type: str
    before_send: Callable[[HeaderSetter], None]
    success: Callable[[Any, Optional[str], Any], None]
    error: Callable[[Any, Optional[str], Any], None]
    method: str = "GET"
    username: Optional[str] = None
    password: Optional[str] = None
    data: Optional[dict[str, Any]] = None


@runtime_checkable
class Transport(Protocol):
    def send(self, params: TransportParams) -> None: ...


def parse_body(response: Response, data_type: str) -> Any:
    if data_type == "json":
        return response.json()
    if data_type == "xml":
        return ElementTree.fromstring(response.content)
    if data_type in ("text", "html"):
        return response.text
    return response.content


class HttpxTransport:
    """Asynchronous transport on top of ``httpx.AsyncClient``.

    ``send`` schedules the request on the running event loop and returns
    immediately; the ``success`` or ``error`` continuation of the params is
    called from that task once the response arrives.
    """

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        config: Optional[Config] = None,
        cookies: Optional[Cookies] = None,
    ) -> None:
        self._config = config or Config()
        self._owns_client = client is None
        if client is None:
            client = AsyncClient(
                **get_httpx_client_kwargs(self._config), cookies=cookies
            )
        self._client = client
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def cookies(self) -> Cookies:
        return self._client.cookies

    def send(self, params: TransportParams) -> None:
        task = asyncio.get_running_loop().create_task(self._dispatch(params))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def _build_request_kwargs(self, params: TransportParams) -> dict[str, Any]:
        header_setter = HeaderSetter()
        params.before_send(header_setter)

        kwargs: dict[str, Any] = {"headers": header_setter.headers}
        if params.username is not None:
            kwargs["auth"] = BasicAuth(params.username, params.password or "")
        if params.data is not None:
            if params.method == "GET":
                kwargs["params"] = params.data
            else:
                kwargs["data"] = params.data
        return kwargs

    async def _dispatch(self, params: TransportParams) -> None:
        logger.debug(f"Request: {params.method} {params.url}")
        try:
            kwargs = self._build_request_kwargs(params)
            response = await self._client.request(params.method, params.url, **kwargs)
        except TimeoutException as e:
            logger.debug(f"Request timed out: {params.url}")
            params.error(None, STATUS_TEXT_TIMEOUT, e)
            return
        except Exception as e:
            # HTTPError, InvalidURL and failures from before_send
            logger.debug(f"Request failed: {params.url}: {e!r}")
            params.error(None, STATUS_TEXT_ERROR, e)
            return

        logger.debug(f"Response: {response.status_code} {params.url}")
        if not response.is_success:
            params.error(response, STATUS_TEXT_ERROR, response.reason_phrase)
            return

        try:
            body = parse_body(response, params.data_type)
        except (ValueError, ElementTree.ParseError) as e:
            params.error(response, STATUS_TEXT_PARSER_ERROR, e)
            return

        params.success(body, STATUS_TEXT_SUCCESS, response)

    async def join(self) -> None:
        """Wait for every scheduled dispatch, including retries they schedule.

        Every dispatch is awaited even when one of them raised, for example
        from an outcome listener. The first such exception is re-raised once
        nothing is pending.
        """
        errors: list[BaseException] = []
        awaited: set[asyncio.Task[None]] = set()
        while waiting := self._pending - awaited:
            awaited |= waiting
            results = await asyncio.gather(*waiting, return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    logger.error(f"Dispatch raised: {result!r}")
                    errors.append(result)
        if errors:
            raise errors[0]

    async def aclose(self) -> None:
        try:
            await self.join()
        finally:
            if self._owns_client:
                await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
