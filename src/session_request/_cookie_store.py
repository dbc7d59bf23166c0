from dataclasses import dataclass
from logging import getLogger
from typing import Optional, Protocol, runtime_checkable

from httpx import URL, Cookies

logger = getLogger(__name__)


@dataclass(frozen=True)
class CookieDetails:
    """Identifies a cookie by the url it is sent to and its name."""

    url: str
    name: str


@runtime_checkable
class CookieStore(Protocol):
    def get(self, details: CookieDetails) -> Optional[str]: ...

    def remove(self, details: CookieDetails) -> None: ...


def _domain_matches(cookie_domain: str, host: str) -> bool:
    domain = cookie_domain.lstrip(".").lower()
    if not domain:
        return True
    return host == domain or host.endswith(f".{domain}")


class HttpxCookieStore:
    """Cookie store backed by an ``httpx.Cookies`` jar.

    Pass the same jar to the ``httpx.AsyncClient`` used by the transport so
    that removals are seen by the next request.
    """

    def __init__(self, cookies: Optional[Cookies] = None) -> None:
        self.cookies = cookies if cookies is not None else Cookies()

    def _matching(self, details: CookieDetails):
        host = (URL(details.url).host or "").lower()
        return [
            cookie
            for cookie in self.cookies.jar
            if cookie.name == details.name and _domain_matches(cookie.domain, host)
        ]

    def get(self, details: CookieDetails) -> Optional[str]:
        for cookie in self._matching(details):
            return cookie.value
        return None

    def remove(self, details: CookieDetails) -> None:
        matching = self._matching(details)
        for cookie in matching:
            self.cookies.jar.clear(cookie.domain, cookie.path, cookie.name)
        logger.debug(
            f"Removed {len(matching)} cookie(s) named {details.name} for {details.url}"
        )
