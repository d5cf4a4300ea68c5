"""Pytest configuration and fixtures."""

import json
from typing import Any, Dict, List, Optional

import pytest
from requests.structures import CaseInsensitiveDict

from cohere_lib import CohereClient
from cohere_lib.config import ConnectionSettings
from cohere_lib.utils.http import HttpRequester


class FakeResponse:
    """Just enough of ``requests.Response`` for the requester."""

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self.text = text if text is not None else json.dumps(body)


class FakeSession:
    """
    Stands in for ``requests.Session``: records every request and replays
    the queued responses (or raises queued exceptions) in order.
    """

    def __init__(self) -> None:
        self.queue: List[Any] = []
        self.calls: List[Dict[str, Any]] = []

    def add(self, body: Any = None, status_code: int = 200, **kwargs) -> "FakeSession":
        self.queue.append(FakeResponse(body, status_code, **kwargs))
        return self

    def fail(self, exc: BaseException) -> "FakeSession":
        self.queue.append(exc)
        return self

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers or {}),
                "json": json.loads(data) if data is not None else None,
                "timeout": timeout,
            }
        )
        if not self.queue:
            raise AssertionError(f"Unexpected request to {url}")
        item = self.queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def settings() -> ConnectionSettings:
    return ConnectionSettings(
        api_key="test-key", base_url="https://api.cohere.test", version="v1"
    )


@pytest.fixture
def requester(settings: ConnectionSettings, session: FakeSession) -> HttpRequester:
    return HttpRequester(settings=settings, timeout=5, session=session)


@pytest.fixture
def client(session: FakeSession) -> CohereClient:
    return CohereClient(
        api_key="test-key",
        api="https://api.cohere.test/",
        version="v1",
        session=session,
    )
