"""Base search engine — Abstract interface for all search engine drivers.

Every search backend must implement this interface to index and query
searchable models. The engine is responsible for:
  1. Writing model batches to the backend index (update / delete)
  2. Translating a ``SearchBuilder`` into a backend query
  3. Mapping raw results back to primary keys and models
  4. Reporting the total number of matches for pagination
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from xunscout.engines.base.exceptions import MissingQueryContextError
from xunscout.models.builder import SearchBuilder
from xunscout.models.results import SearchResults


class SearchEngine(ABC):
    """Abstract base class for search engines.

    Engines keep no per-query state: everything needed to interpret a
    result travels in the :class:`SearchResults` returned by ``search()``
    and ``paginate()``. Backend handles may still be shared per model type,
    so each driver documents how many requests an instance can serve at once.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique engine name (e.g., 'xunsearch')."""

    @abstractmethod
    def update(self, models: Sequence[Any]) -> None:
        """Add or replace the given models in the index.

        Args:
            models: Models of one searchable type.
        """

    @abstractmethod
    def delete(self, models: Sequence[Any]) -> None:
        """Remove the given models from the index.

        Args:
            models: Models of one searchable type.
        """

    @abstractmethod
    def search(self, builder: SearchBuilder) -> SearchResults:
        """Run a query and return its results with their context."""

    @abstractmethod
    def paginate(self, builder: SearchBuilder, per_page: int, page: int) -> SearchResults:
        """Run a query for one 1-based page of ``per_page`` results."""

    @abstractmethod
    def map_ids(self, results: SearchResults) -> list[Any]:
        """Pluck the primary keys from a result set."""

    @abstractmethod
    def get_total_count(self, results: SearchResults) -> int:
        """Total number of matches for the query behind ``results``."""

    def map(self, results: SearchResults, model: Any) -> list[Any]:
        """Load the models matching a result set.

        Issues a single ``model.find_many(keys)`` lookup. The returned order
        is whatever the persistence layer produces, not the ranking order.
        """
        return list(model.find_many(self.map_ids(results)))

    @staticmethod
    def require_context(results: Any) -> SearchResults:
        """Ensure ``results`` came from ``search()`` or ``paginate()``.

        Raises:
            MissingQueryContextError: For a bare result set with no query context.
        """
        if not isinstance(results, SearchResults):
            raise MissingQueryContextError(
                "No prior query context: pass the SearchResults returned by search() or paginate(), "
                f"got {type(results).__name__}"
            )
        return results
