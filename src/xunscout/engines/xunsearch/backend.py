"""Xunsearch client surface used by the engine.

The driver does not speak the Xunsearch wire protocol itself. It talks to a
native client through the small structural interfaces below; any object
with matching methods can be plugged in via a client factory
(``Callable[[str], XunsearchClient]`` taking the project INI text).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, Protocol


class Document:
    """A backend-native record holding one model's indexed fields.

    Fields are readable both as attributes and as mapping keys, which is how
    result documents expose the primary key to ``map_ids()``.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields = dict(fields or {})

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._fields == other._fields
        return NotImplemented

    def __repr__(self) -> str:
        return f"Document({self._fields!r})"

    def get_fields(self) -> dict[str, Any]:
        return dict(self._fields)


class XunsearchIndex(Protocol):
    """Batched-write handle (``XSIndex``)."""

    def open_buffer(self) -> Any: ...

    def update(self, document: Document) -> Any: ...

    def delete(self, keys: Sequence[Any]) -> Any: ...

    def close_buffer(self) -> Any: ...

    def flush_index(self) -> Any: ...


class XunsearchSearch(Protocol):
    """Query handle (``XSSearch``).

    Setters return the handle itself so calls can be chained.
    """

    def set_fuzzy(self, value: bool = True) -> XunsearchSearch: ...

    def set_project(self, name: str) -> XunsearchSearch: ...

    def add_range(self, field: str, start: Any, end: Any) -> XunsearchSearch: ...

    def set_sort(self, field: str, direction: str) -> XunsearchSearch: ...

    def set_limit(self, limit: int, offset: int = 0) -> XunsearchSearch: ...

    def search(self, query: str | None = None) -> Sequence[Any]: ...

    def get_db_total(self) -> int: ...


class XunsearchClient(Protocol):
    """Session created from a project INI (``XS``)."""

    def get_index(self) -> XunsearchIndex: ...

    def get_search(self) -> XunsearchSearch: ...


ClientFactory = Callable[[str], XunsearchClient]
