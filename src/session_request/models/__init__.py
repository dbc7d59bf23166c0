from .errors import (
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
    "InvalidRequestError",
    "RequestAlreadySentError",
    "RequestFailure",
    "SessionRequestError",
    "SignalAlreadyDispatchedError",
    "TransportFailure",
]
