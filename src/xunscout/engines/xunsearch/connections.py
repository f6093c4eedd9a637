"""Connection registry — One Xunsearch session per searchable model type.

Each model type lives in its own Xunsearch project, so a session built for
one type cannot serve another. The registry builds the project INI for a
type the first time it is needed and caches the resulting session until it
is forgotten. Callers own the registry and decide its lifetime.

A session and its handles serve one logical request at a time; concurrent
requests each need their own registry.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from xunscout.config.settings import XunsearchSettings
from xunscout.engines.base.exceptions import ConfigurationError
from xunscout.engines.xunsearch.backend import (
    ClientFactory,
    XunsearchClient,
    XunsearchIndex,
    XunsearchSearch,
)
from xunscout.engines.xunsearch.ini import build_model_ini

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Registry of backend sessions keyed by model type.

    Example:
        >>> registry = ConnectionRegistry(settings.xunsearch, client_factory=XS)
        >>> registry.index(Post).open_buffer()
        >>> registry.search(Post) is registry.search(Post)  # same session
    """

    def __init__(self, settings: XunsearchSettings, client_factory: ClientFactory | None = None) -> None:
        self._settings = settings
        self._client_factory = client_factory
        self._clients: dict[type, XunsearchClient] = {}

    @property
    def settings(self) -> XunsearchSettings:
        return self._settings

    def client(self, model: Any) -> XunsearchClient:
        """Return the session for ``model``'s type, creating it on first use.

        Args:
            model: A searchable model type or an instance of one.

        Raises:
            ConfigurationError: If no client factory is configured.
        """
        model_type = _model_type(model)
        client = self._clients.get(model_type)
        if client is None:
            ini = build_model_ini(self._settings, model_type)
            client = self._resolve_factory()(ini)
            self._clients[model_type] = client
            logger.info(
                "Opened Xunsearch session for %s (project: %s)",
                model_type.__name__,
                model_type.searchable_as(),
            )
        return client

    def index(self, model: Any) -> XunsearchIndex:
        return self.client(model).get_index()

    def search(self, model: Any) -> XunsearchSearch:
        return self.client(model).get_search()

    def forget(self, model: Any) -> None:
        """Drop the cached session for ``model``'s type, if any."""
        self._clients.pop(_model_type(model), None)

    def clear(self) -> None:
        self._clients.clear()

    @property
    def connected_models(self) -> list[type]:
        """Model types that currently hold a session."""
        return list(self._clients.keys())

    def _resolve_factory(self) -> ClientFactory:
        if self._client_factory is not None:
            return self._client_factory

        path = self._settings.client_factory
        if not path:
            raise ConfigurationError(
                "No Xunsearch client factory configured. "
                "Pass client_factory= or set xunsearch.client_factory."
            )

        module_name, _, attr = path.partition(":")
        try:
            module = importlib.import_module(module_name)
            factory = getattr(module, attr)
        except (ImportError, AttributeError) as e:
            raise ConfigurationError(f"Cannot load Xunsearch client factory '{path}': {e}") from e

        if not callable(factory):
            raise ConfigurationError(f"Xunsearch client factory '{path}' is not callable")

        self._client_factory = factory
        return factory


def _model_type(model: Any) -> type:
    return model if isinstance(model, type) else type(model)
