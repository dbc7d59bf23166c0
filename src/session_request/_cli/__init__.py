import click

from .cli_send import send


@click.group()
@click.version_option(package_name="session-request")
def cli() -> None:
    """Session-cookie aware HTTP requests."""


cli.add_command(send)
