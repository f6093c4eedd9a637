"""Searchable model contract.

Any application entity can be indexed by an engine as long as its class
satisfies :class:`Searchable`. The persistence layer behind ``find_many`` is
entirely up to the application (an ORM query, a repository, an in-memory
dict); the engine only ever asks it for a batch of primary keys.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Searchable(Protocol):
    """Structural interface every searchable model type must provide."""

    @classmethod
    def get_key_name(cls) -> str:
        """Name of the primary-key field."""
        ...

    def get_key(self) -> Any:
        """Primary-key value of this instance."""
        ...

    def to_searchable_dict(self) -> dict[str, Any]:
        """Field values to index for this instance. Empty means "do not index"."""
        ...

    @classmethod
    def searchable_as(cls) -> str:
        """Name of the Xunsearch project (index) holding this model type."""
        ...

    @classmethod
    def searchable_schema(cls) -> dict[str, str]:
        """Field name to Xunsearch field type (``id``, ``title``, ``body``, ...)."""
        ...

    @classmethod
    def find_many(cls, keys: Iterable[Any]) -> list[Any]:
        """Load the instances whose primary key is in ``keys``."""
        ...


class SearchableMixin:
    """Default implementations for most of :class:`Searchable`.

    Subclasses still declare ``searchable_schema()`` and ``find_many()``.
    ``to_searchable_dict()`` uses ``model_dump()`` when the class is a
    pydantic model and the instance ``__dict__`` otherwise.

    Example:
        >>> class Post(SearchableMixin, BaseModel):
        ...     id: int
        ...     title: str
        ...
        ...     @classmethod
        ...     def searchable_schema(cls) -> dict[str, str]:
        ...         return {"id": "id", "title": "title"}
    """

    key_name: ClassVar[str] = "id"

    @classmethod
    def get_key_name(cls) -> str:
        return cls.key_name

    def get_key(self) -> Any:
        return getattr(self, self.get_key_name())

    def to_searchable_dict(self) -> dict[str, Any]:
        dump = getattr(self, "model_dump", None)
        if callable(dump):
            return dict(dump())
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    @classmethod
    def searchable_as(cls) -> str:
        return cls.__name__.lower()
