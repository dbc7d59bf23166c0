"""Session-cookie aware request client.

Sends a request through an injected transport and, when a session cookie is
configured, clears that cookie and retries once after an authentication
failure.
"""

from ._config import Config
from ._cookie_store import CookieDetails, CookieStore, HttpxCookieStore
from ._request_client import RequestClient
from ._signals import RequestSignals, Signal
from ._transport import HeaderSetter, HttpxTransport, Transport, TransportParams
from ._utils._request_spec import RequestSpec, RetryOptions
from .models.errors import (
    AuthFailure,
    InvalidRequestError,
    RequestAlreadySentError,
    RequestFailure,
    SessionRequestError,
    SignalAlreadyDispatchedError,
    TransportFailure,
)

__all__ = [
    "AuthFailure",
    "Config",
    "CookieDetails",
    "CookieStore",
    "HeaderSetter",
    "HttpxCookieStore",
    "HttpxTransport",
    "InvalidRequestError",
    "RequestAlreadySentError",
    "RequestClient",
    "RequestFailure",
    "RequestSignals",
    "RequestSpec",
    "RetryOptions",
    "SessionRequestError",
    "Signal",
    "SignalAlreadyDispatchedError",
    "Transport",
    "TransportFailure",
    "TransportParams",
]
