"""Query descriptor passed from the application to a search engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SearchCallback = Callable[[Any, str, dict[str, Any]], Any]


class OrderClause(BaseModel):
    """A single sort directive."""

    column: str = Field(description="Field to sort on")
    direction: Literal["asc", "desc"] = Field(default="asc", description="Sort direction")


class SearchBuilder(BaseModel):
    """Everything an engine needs to run one query.

    Builders are cheap, transient values: build one per search call. The
    fluent helpers mutate and return the builder so calls can be chained::

        builder = SearchBuilder(query="xunsearch", model=Post).where("status", "active").take(20)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    query: str = Field(default="", description="Raw query string passed to the backend")
    model: Any = Field(default=None, description="Searchable model type being queried")
    index: str | None = Field(default=None, description="Project name override")
    wheres: dict[str, Any] = Field(default_factory=dict, description="Equality filters, field -> value")
    orders: list[OrderClause] = Field(default_factory=list, description="Sort directives, primary first")
    limit: int | None = Field(default=None, description="Maximum number of documents to return")
    callback: SearchCallback | None = Field(
        default=None,
        description="Raw escape hatch called as callback(search, query, options) instead of translation",
    )

    def where(self, field: str, value: Any) -> SearchBuilder:
        self.wheres[field] = value
        return self

    def order_by(self, column: str, direction: Literal["asc", "desc"] = "asc") -> SearchBuilder:
        self.orders.append(OrderClause(column=column, direction=direction))
        return self

    def take(self, limit: int) -> SearchBuilder:
        self.limit = limit
        return self

    def within(self, index: str) -> SearchBuilder:
        self.index = index
        return self
