from typing import Any, Optional

from .._utils.constants import AUTH_FAILURE_STATUS_CODES


class SessionRequestError(Exception):
    """Base class for every error raised by session_request."""


class InvalidRequestError(SessionRequestError, ValueError):
    """Raised when a request cannot be built from the given options."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class RequestAlreadySentError(SessionRequestError):
    def __init__(self, message="This request has already been sent."):
        self.message = message
        super().__init__(self.message)


class SignalAlreadyDispatchedError(SessionRequestError):
    def __init__(self, message="This signal has already been dispatched."):
        self.message = message
        super().__init__(self.message)


class RequestFailure(SessionRequestError):
    """A failed attempt, as reported by the transport.

    Delivered to the caller through the error notification, never raised
    out of ``RequestClient.send``.

    Attributes:
        raw: The raw transport object (an ``httpx.Response`` for the default
            transport), or ``None`` when no response was received.
        status_text: Short failure category such as ``"error"``,
            ``"timeout"`` or ``"parsererror"``.
        error_thrown: The exception or reason phrase that caused the failure.
    """

    def __init__(self, raw: Any, status_text: Optional[str], error_thrown: Any):
        self.raw = raw
        self.status_text = status_text
        self.error_thrown = error_thrown
        super().__init__(self._build_message())

    @property
    def status_code(self) -> Optional[int]:
        status = getattr(self.raw, "status_code", None)
        if status is None and isinstance(self.raw, dict):
            status = self.raw.get("status")
        return status

    def _build_message(self) -> str:
        parts = [str(part) for part in (self.status_code, self.status_text) if part]
        if self.error_thrown:
            parts.append(str(self.error_thrown))
        return " ".join(parts) or "Request failed"

    @staticmethod
    def from_transport(
        raw: Any, status_text: Optional[str], error_thrown: Any
    ) -> "RequestFailure":
        """Classify the arguments of a transport error continuation."""
        failure = RequestFailure(raw, status_text, error_thrown)
        if failure.status_code in AUTH_FAILURE_STATUS_CODES:
            return AuthFailure(raw, status_text, error_thrown)
        return TransportFailure(raw, status_text, error_thrown)


class AuthFailure(RequestFailure):
    """The server rejected the credentials or the session cookie."""


class TransportFailure(RequestFailure):
    """Any failure other than an authentication failure."""
