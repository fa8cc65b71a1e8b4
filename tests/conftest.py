"""Shared helpers for the profile generator tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from src.domain.repository import Repository
from src.domain.settings import ProfileSettings

BASE_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_repo(name: str, pushed_days: Optional[int] = 0, **overrides: Any) -> Repository:
    """Build a Repository pushed ``pushed_days`` days after BASE_TIME."""
    fields: Dict[str, Any] = dict(
        name=name,
        html_url=f"https://github.com/octo/{name}",
        created_at=BASE_TIME - timedelta(days=365),
        updated_at=BASE_TIME,
        pushed_at=None if pushed_days is None else BASE_TIME + timedelta(days=pushed_days),
    )
    fields.update(overrides)
    return Repository(**fields)


def make_repo_json(name: str, **overrides: Any) -> Dict[str, Any]:
    """Build one item as returned by GET /users/{user}/repos."""
    node: Dict[str, Any] = {
        "name": name,
        "html_url": f"https://github.com/octo/{name}",
        "description": f"{name} description",
        "language": "Python",
        "homepage": "",
        "fork": False,
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2025-02-01T00:00:00Z",
        "pushed_at": "2025-02-02T00:00:00Z",
        "stargazers_count": 3,
        "forks_count": 1,
    }
    node.update(overrides)
    return node


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "", headers=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.headers = headers or {}

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class FakeSession:
    """Stand-in for requests.Session replaying queued responses per method.

    A queued exception instance is raised instead of returned.
    """

    def __init__(self, get: Optional[List[Any]] = None, head: Optional[List[Any]] = None):
        self.queued = {"get": list(get or []), "head": list(head or [])}
        self.calls: List[Dict[str, Any]] = []

    def _next(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.queued[method]:
            raise AssertionError(f"unexpected {method.upper()} {url}")
        outcome = self.queued[method].pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("get", url, **kwargs)

    def head(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._next("head", url, **kwargs)


@pytest.fixture
def settings() -> ProfileSettings:
    return ProfileSettings(username="octo", token="secret", release_check_delay=0, max_retries=2)


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("src.infrastructure.github_client.time.sleep", lambda _: None)
