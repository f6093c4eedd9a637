"""Result context returned by ``search()`` and ``paginate()``."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchResults(BaseModel):
    """Raw backend results bundled with the context needed to interpret them.

    Carrying the model type, its key name and the search handle alongside
    the documents lets ``map_ids()`` and ``get_total_count()`` work without
    the engine remembering anything about the last query.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    raw: Any = Field(default=None, description="Result exactly as returned by the backend or callback")
    model: Any = Field(description="Searchable model type that was queried")
    key_name: str = Field(description="Primary-key field name to read from each document")
    search: Any = Field(description="Backend search handle the query ran on")
    total: int | None = Field(default=None, description="Backend match count captured when the query returned")

    @property
    def documents(self) -> list[Any]:
        """The raw result as a list.

        ``None`` gives an empty list. A single value that is not a sequence of
        documents (a mapping, a string, a count returned by a callback) is
        wrapped in a one-item list.
        """
        if self.raw is None:
            return []
        if isinstance(self.raw, (str, bytes, Mapping)) or not isinstance(self.raw, Iterable):
            return [self.raw]
        return list(self.raw)
