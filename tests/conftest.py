"""Shared test fixtures and configuration.

The Xunsearch client is replaced by in-memory fakes that record every call
made on them, so engine tests can assert on the exact translation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

import pytest
from pydantic import BaseModel

from xunscout.config.settings import Settings, XunsearchSettings
from xunscout.engines.xunsearch.connections import ConnectionRegistry
from xunscout.engines.xunsearch.engine import XunsearchEngine
from xunscout.models.searchable import SearchableMixin

# ── Fake Xunsearch client ────────────────────────────────────────────────────


class FakeIndex:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def open_buffer(self) -> None:
        self.calls.append(("open_buffer",))

    def update(self, document: Any) -> None:
        self.calls.append(("update", document))

    def delete(self, keys: Any) -> None:
        self.calls.append(("delete", list(keys)))

    def close_buffer(self) -> None:
        self.calls.append(("close_buffer",))

    def flush_index(self) -> None:
        self.calls.append(("flush_index",))

    @property
    def documents(self) -> list[Any]:
        return [call[1] for call in self.calls if call[0] == "update"]


class FakeSearch:
    def __init__(self, results: list[Any] | None = None, total: int = 0) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.results = results or []
        self.total = total

    def set_fuzzy(self, value: bool = True) -> FakeSearch:
        self.calls.append(("set_fuzzy", value))
        return self

    def set_project(self, name: str) -> FakeSearch:
        self.calls.append(("set_project", name))
        return self

    def add_range(self, field: str, start: Any, end: Any) -> FakeSearch:
        self.calls.append(("add_range", field, start, end))
        return self

    def set_sort(self, field: str, direction: str) -> FakeSearch:
        self.calls.append(("set_sort", field, direction))
        return self

    def set_limit(self, limit: int, offset: int = 0) -> FakeSearch:
        self.calls.append(("set_limit", limit, offset))
        return self

    def search(self, query: str | None = None) -> list[Any]:
        self.calls.append(("search", query))
        return list(self.results)

    def get_db_total(self) -> int:
        return self.total


class FakeClient:
    def __init__(self, ini: str) -> None:
        self.ini = ini
        self.index = FakeIndex()
        self.search = FakeSearch()

    def get_index(self) -> FakeIndex:
        return self.index

    def get_search(self) -> FakeSearch:
        return self.search


class FakeClientFactory:
    """Callable building one ``FakeClient`` per INI, remembering each."""

    def __init__(self) -> None:
        self.clients: list[FakeClient] = []

    def __call__(self, ini: str) -> FakeClient:
        client = FakeClient(ini)
        self.clients.append(client)
        return client

    @property
    def last(self) -> FakeClient:
        return self.clients[-1]


# ── Sample searchable models ─────────────────────────────────────────────────


class Post(SearchableMixin, BaseModel):
    id: int
    title: str
    body: str = ""
    published: bool = True

    store: ClassVar[dict[int, Post]] = {}

    @classmethod
    def searchable_as(cls) -> str:
        return "posts"

    @classmethod
    def searchable_schema(cls) -> dict[str, str]:
        return {"id": "id", "title": "title", "body": "body"}

    @classmethod
    def find_many(cls, keys: Iterable[Any]) -> list[Post]:
        # Key order, not ranking order, like a plain ``WHERE id IN (...)``
        return [cls.store[k] for k in sorted(keys) if k in cls.store]

    def to_searchable_dict(self) -> dict[str, Any]:
        if not self.published:
            return {}
        return {"title": self.title, "body": self.body}


class Comment(SearchableMixin, BaseModel):
    key_name: ClassVar[str] = "comment_id"

    comment_id: int
    body: str

    @classmethod
    def searchable_schema(cls) -> dict[str, str]:
        return {"comment_id": "id", "body": "body"}

    @classmethod
    def find_many(cls, keys: Iterable[Any]) -> list[Comment]:
        return []


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def xs_settings() -> XunsearchSettings:
    return XunsearchSettings(fuzzy=True, hosts={"index": "10.0.0.5:8383", "search": "10.0.0.5:8384"})


@pytest.fixture
def client_factory() -> FakeClientFactory:
    return FakeClientFactory()


@pytest.fixture
def connections(xs_settings: XunsearchSettings, client_factory: FakeClientFactory) -> ConnectionRegistry:
    return ConnectionRegistry(xs_settings, client_factory=client_factory)


@pytest.fixture
def engine(xs_settings: XunsearchSettings, connections: ConnectionRegistry) -> XunsearchEngine:
    return XunsearchEngine(xs_settings, connections)


@pytest.fixture
def post_model() -> type[Post]:
    Post.store = {}
    return Post


@pytest.fixture
def comment_model() -> type[Comment]:
    return Comment


@pytest.fixture
def posts(post_model: type[Post]) -> list[Post]:
    items = [
        post_model(id=1, title="Xunsearch tutorial", body="Getting started"),
        post_model(id=2, title="Draft", body="Not ready", published=False),
        post_model(id=3, title="Fuzzy search", body="Tolerant matching"),
    ]
    post_model.store = {p.id: p for p in items}
    return items
