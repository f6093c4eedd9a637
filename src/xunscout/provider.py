"""Default engine wiring.

Registers the built-in drivers on an :class:`EngineRegistry` from
settings, the way an application boots its search layer::

    registry = create_engine_registry(Settings())
    engine = registry.engine()  # "xunsearch"
"""

from __future__ import annotations

from xunscout.config.settings import Settings
from xunscout.engines.base.registry import EngineRegistry
from xunscout.engines.xunsearch.backend import ClientFactory
from xunscout.engines.xunsearch.connections import ConnectionRegistry
from xunscout.engines.xunsearch.engine import XunsearchEngine


def register_default_engines(
    registry: EngineRegistry,
    settings: Settings,
    client_factory: ClientFactory | None = None,
) -> ConnectionRegistry:
    """Register the ``xunsearch`` driver.

    Returns:
        The connection registry the engine will use, so the caller can
        manage session lifetimes. The registry, and therefore the engine it
        builds, serves one logical request at a time; build a separate
        engine registry per concurrent request.
    """
    connections = ConnectionRegistry(settings.xunsearch, client_factory)
    registry.register("xunsearch", lambda: XunsearchEngine(settings.xunsearch, connections))
    return connections


def create_engine_registry(settings: Settings, client_factory: ClientFactory | None = None) -> EngineRegistry:
    """Build a registry with every built-in engine and ``xunsearch`` as default."""
    registry = EngineRegistry(default="xunsearch")
    register_default_engines(registry, settings, client_factory)
    return registry
