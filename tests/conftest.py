from typing import Any

import pytest

from tests.fakes import FakeCookieStore, Recorder


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def url() -> str:
    return "http://example.com"


@pytest.fixture
def on_success() -> Recorder:
    return Recorder()


@pytest.fixture
def on_error() -> Recorder:
    return Recorder()


@pytest.fixture
def options(url: str, on_success: Recorder, on_error: Recorder) -> dict[str, Any]:
    return {"url": url, "success": on_success, "error": on_error}


@pytest.fixture
def cookie_store() -> FakeCookieStore:
    return FakeCookieStore()
