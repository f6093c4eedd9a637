"""Xunsearch engine — Index and query searchable models with Xunsearch.

Translates model batches into buffered index writes and ``SearchBuilder``
queries into calls on a Xunsearch search handle. Sessions come from a
:class:`ConnectionRegistry`, one per model type.

Usage::

    connections = ConnectionRegistry(settings.xunsearch, client_factory=XS)
    engine = XunsearchEngine(settings.xunsearch, connections)

    engine.update(posts)
    results = engine.paginate(SearchBuilder(query="xunsearch", model=Post), per_page=10, page=2)
    posts = engine.map(results, Post)
    total = engine.get_total_count(results)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from xunscout.config.settings import XunsearchSettings
from xunscout.engines.base.engine import SearchEngine
from xunscout.engines.base.exceptions import EngineError, MissingQueryContextError
from xunscout.engines.xunsearch.backend import ClientFactory, Document, XunsearchSearch
from xunscout.engines.xunsearch.connections import ConnectionRegistry
from xunscout.models.builder import SearchBuilder
from xunscout.models.results import SearchResults

logger = logging.getLogger(__name__)


class XunsearchEngine(SearchEngine):
    """Search engine backed by a Xunsearch server.

    Query translation rules:
      - ``wheres`` become inclusive range filters with ``start == end``, so
        only exact matches are expressible
      - ``orders`` are applied in declaration order, primary sort first
      - without a limit, ``per_page`` results are returned (15 by default)
      - a builder ``callback`` bypasses translation entirely

    Every query on a model type runs on that type's single search handle in
    the connection registry. The total match count is captured into the
    returned :class:`SearchResults`, but the translation calls themselves
    need exclusive use of the handle: an engine and its registry serve one
    logical request at a time. Concurrent callers need separate
    :class:`ConnectionRegistry` instances.

    Args:
        settings: Xunsearch settings (fuzzy flag, hosts, default page size).
        connections: Session registry, possibly shared with other engine
            instances in the same request. A private one is created when omitted.
        client_factory: Used only when ``connections`` is omitted.
    """

    def __init__(
        self,
        settings: XunsearchSettings | None = None,
        connections: ConnectionRegistry | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._settings = settings or XunsearchSettings()
        self._connections = connections or ConnectionRegistry(self._settings, client_factory)
        self._per_page = self._settings.per_page

    @property
    def name(self) -> str:
        return "xunsearch"

    @property
    def connections(self) -> ConnectionRegistry:
        return self._connections

    # ── Indexing ─────────────────────────────────────────────────────────

    def update(self, models: Sequence[Any]) -> None:
        """Upsert every model with a non-empty searchable dict, then flush."""
        models = list(models)
        if not models:
            return

        index = self._connections.index(models[0])
        index.open_buffer()

        written = 0
        try:
            for model in models:
                fields = model.to_searchable_dict()
                if not fields:
                    continue
                index.update(Document({model.get_key_name(): model.get_key(), **fields}))
                written += 1
        finally:
            # the index handle is shared per model type, so its buffer must not stay open
            index.close_buffer()

        index.flush_index()
        logger.debug("Indexed %d of %d %s models", written, len(models), type(models[0]).__name__)

    def delete(self, models: Sequence[Any]) -> None:
        """Delete the models' documents by primary key, then flush."""
        models = list(models)
        if not models:
            return

        index = self._connections.index(models[0])
        index.delete([model.get_key() for model in models])
        index.flush_index()
        logger.debug("Deleted %d %s documents", len(models), type(models[0]).__name__)

    # ── Search ───────────────────────────────────────────────────────────

    def search(self, builder: SearchBuilder) -> SearchResults:
        search, raw = self._execute(builder, {})
        return self._context(builder, search, raw)

    def paginate(self, builder: SearchBuilder, per_page: int, page: int) -> SearchResults:
        """Run ``builder`` for a 1-based ``page`` of ``per_page`` results.

        The caller's builder is left untouched; the limit is forced on a copy.

        Raises:
            ValueError: If ``page`` is lower than 1.
        """
        if page < 1:
            raise ValueError(f"page must be 1 or greater, got {page}")
        builder = builder.model_copy(update={"limit": per_page})
        search, raw = self._execute(builder, {"page": page - 1})
        return self._context(builder, search, raw)

    def perform_search(self, builder: SearchBuilder, options: Mapping[str, Any] | None = None) -> Any:
        """Translate and run ``builder``, returning the raw backend result.

        Args:
            builder: The query descriptor.
            options: ``{"page": n}`` with a zero-based page index, or empty.

        Raises:
            MissingQueryContextError: If the builder has no model type.
        """
        _, raw = self._execute(builder, options or {})
        return raw

    def _execute(self, builder: SearchBuilder, options: Mapping[str, Any]) -> tuple[XunsearchSearch, Any]:
        if builder.model is None:
            raise MissingQueryContextError("Search builder has no model type to query")

        search = self._connections.search(builder.model)
        options = dict(options)

        if builder.callback is not None:
            return search, builder.callback(search, builder.query, options)

        search.set_fuzzy(self._settings.fuzzy)

        if builder.index:
            search.set_project(builder.index)

        for field, value in builder.wheres.items():
            search.add_range(field, value, value)

        for order in builder.orders:
            search.set_sort(order.column, order.direction)

        limit = builder.limit or self._per_page
        offset = options["page"] * limit if "page" in options else 0

        logger.debug(
            "Xunsearch query %r (filters=%s, orders=%d, limit=%d, offset=%d)",
            builder.query,
            list(builder.wheres),
            len(builder.orders),
            limit,
            offset,
        )
        search.set_limit(limit, offset)
        return search, search.search(builder.query)

    # ── Result mapping ───────────────────────────────────────────────────

    def map_ids(self, results: SearchResults) -> list[Any]:
        context = self.require_context(results)
        return [_read_field(document, context.key_name) for document in context.documents]

    def get_total_count(self, results: SearchResults) -> int:
        """Total matches reported by the backend for the query behind ``results``.

        The count is read from the search handle as soon as the query returns,
        so later queries on the same model type do not change it.
        """
        context = self.require_context(results)
        if context.total is not None:
            return context.total
        return context.search.get_db_total()

    @staticmethod
    def _context(builder: SearchBuilder, search: XunsearchSearch, raw: Any) -> SearchResults:
        return SearchResults(
            raw=raw,
            model=builder.model,
            key_name=builder.model.get_key_name(),
            search=search,
            total=search.get_db_total(),
        )


def _read_field(document: Any, name: str) -> Any:
    try:
        if isinstance(document, Mapping):
            return document[name]
        return getattr(document, name)
    except (KeyError, AttributeError, TypeError) as e:
        raise EngineError(
            f"Result document {document!r} has no '{name}' field; "
            "a search callback must return documents exposing the primary key"
        ) from e
