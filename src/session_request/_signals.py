from logging import getLogger
from typing import Any, Callable

from .models.errors import SignalAlreadyDispatchedError

logger = getLogger(__name__)


class Signal:
    """An outcome notification that is dispatched at most once.

    Listeners are called in registration order with the dispatch arguments.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Callable[..., Any]] = []
        self._dispatch_count = 0

    def add(self, listener: Callable[..., Any]) -> None:
        if not callable(listener):
            raise TypeError(f"Signal listener must be callable, got {listener!r}")
        self._listeners.append(listener)

    def remove(self, listener: Callable[..., Any]) -> None:
        self._listeners.remove(listener)

    @property
    def dispatched(self) -> bool:
        return self._dispatch_count > 0

    @property
    def dispatch_count(self) -> int:
        return self._dispatch_count

    def dispatch(self, *args: Any) -> None:
        if self.dispatched:
            raise SignalAlreadyDispatchedError(
                f"Signal '{self.name}' has already been dispatched."
            )
        self._dispatch_count += 1
        logger.debug(f"Dispatching {self.name} to {len(self._listeners)} listener(s)")
        for listener in list(self._listeners):
            listener(*args)


class RequestSignals:
    """The outcome notifications exposed as ``RequestClient.on``."""

    def __init__(self) -> None:
        self.response_received = Signal("response_received")
        self.error_received = Signal("error_received")
