import logging

from rich.logging import RichHandler

LIBRARY_LOGGER = "session_request"


def setup_logging(verbose: bool = False) -> None:
    """Route library logs through rich; debug level when verbose."""
    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
