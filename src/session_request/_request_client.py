from logging import getLogger
from typing import Any, Mapping, Optional, Union

from ._config import Config
from ._cookie_store import CookieDetails, CookieStore
from ._signals import RequestSignals
from ._transport import HeaderSetter, Transport, TransportParams
from ._utils._request_spec import RequestSpec, RetryOptions
from ._utils.constants import AUTH_TYPE_BASIC, AUTH_TYPE_FIELD, HEADER_ACCEPT
from .models.errors import (
    AuthFailure,
    InvalidRequestError,
    RequestAlreadySentError,
    RequestFailure,
)

logger = getLogger(__name__)


class RequestClient:
    """Sends one logical request and reports its outcome.

    When the spec names a session cookie, an authentication failure on the
    first attempt removes that cookie from the cookie store and the request
    is sent once more. Any other failure, or a failure on the last attempt,
    is delivered through ``on.error_received`` as a :class:`RequestFailure`.
    Success is delivered through ``on.response_received`` with
    ``(body, status_text, raw)``.

    Each notification fires at most once, and only one of them fires.
    """

    def __init__(
        self,
        spec: RequestSpec,
        *,
        transport: Transport,
        cookie_store: Optional[CookieStore] = None,
    ) -> None:
        if spec.session_cookie_name and cookie_store is None:
            raise InvalidRequestError(
                "A cookie store is required when a session cookie is set.",
                field="cookie_store",
            )
        self._spec = spec
        self._transport = transport
        self._cookie_store = cookie_store
        self._attempt_count = 0
        self._sent = False

        self.on = RequestSignals()
        self.on.response_received.add(spec.on_success)
        self.on.error_received.add(spec.on_error)

    @classmethod
    def create(
        cls,
        options: Union[RequestSpec, Mapping[str, Any]],
        retry_options: Union[RetryOptions, Mapping[str, Any], None] = None,
        *,
        transport: Transport,
        cookie_store: Optional[CookieStore] = None,
        config: Optional[Config] = None,
    ) -> "RequestClient":
        """Validate ``options`` and build a client.

        The session cookie name comes from ``retry_options`` or, when those
        are not given, from ``config``.

        Raises:
            InvalidRequestError: If ``options`` are invalid, or if a session
                cookie is set without a ``cookie_store``.
        """
        if retry_options is None and config is not None:
            retry_options = RetryOptions(config.session_cookie_name)
        spec = RequestSpec.create(options, retry_options)
        return cls(spec, transport=transport, cookie_store=cookie_store)

    @property
    def spec(self) -> RequestSpec:
        return self._spec

    @property
    def attempt_count(self) -> int:
        return self._attempt_count

    @property
    def max_attempts(self) -> int:
        return self._spec.max_attempts

    def send(self) -> None:
        if self._sent:
            raise RequestAlreadySentError()
        self._sent = True
        self._dispatch()

    def _before_send(self, header_setter: HeaderSetter) -> None:
        header_setter.set_request_header(HEADER_ACCEPT, self._spec.accept)

    def _build_params(self) -> TransportParams:
        spec = self._spec
        params = TransportParams(
            url=spec.url,
            data_type=spec.data_type,
            method=spec.method,
            before_send=self._before_send,
            success=self._on_transport_success,
            error=self._on_transport_error,
        )
        data = dict(spec.data) if spec.data is not None else None
        if spec.has_auth:
            params.username = spec.username
            params.password = spec.password
            data = data if data is not None else {}
            data[AUTH_TYPE_FIELD] = AUTH_TYPE_BASIC
        params.data = data
        return params

    def _dispatch(self) -> None:
        self._attempt_count += 1
        logger.debug(
            f"Sending {self._spec.method} {self._spec.url} "
            f"(attempt {self._attempt_count}/{self.max_attempts})"
        )
        self._transport.send(self._build_params())

    def _on_transport_success(self, body: Any, status_text: Optional[str], raw: Any):
        logger.debug(f"Response received for {self._spec.url}")
        self.on.response_received.dispatch(body, status_text, raw)

    def _on_transport_error(
        self, raw: Any, status_text: Optional[str], error_thrown: Any
    ):
        failure = RequestFailure.from_transport(raw, status_text, error_thrown)
        if (
            isinstance(failure, AuthFailure)
            and self._attempt_count < self.max_attempts
        ):
            self._clear_session_cookie()
            self._dispatch()
            return

        logger.debug(f"Request to {self._spec.url} failed: {failure}")
        self.on.error_received.dispatch(failure)

    def _clear_session_cookie(self) -> None:
        details = CookieDetails(url=self._spec.url, name=self._spec.session_cookie_name)
        logger.debug(f"Authentication failed, removing cookie {details.name}")
        try:
            self._cookie_store.remove(details)
        except Exception as e:
            logger.warning(
                f"Could not remove cookie {details.name} for {details.url}: {e}"
            )
