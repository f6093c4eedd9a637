"""Engine Registry — Maps driver names to search engine factories.

Applications pick an engine by name ("xunsearch") from configuration. The
registry holds a factory per name and builds each engine lazily on first
request, caching the instance for later lookups.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from xunscout.engines.base.engine import SearchEngine
from xunscout.engines.base.exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)

EngineFactory = Callable[[], SearchEngine]


class EngineRegistry:
    """Registry for named search engine drivers.

    Example:
        >>> registry = EngineRegistry()
        >>> registry.register("xunsearch", lambda: XunsearchEngine(settings.xunsearch))
        >>> engine = registry.engine("xunsearch")
    """

    def __init__(self, default: str | None = None) -> None:
        self._factories: dict[str, EngineFactory] = {}
        self._instances: dict[str, SearchEngine] = {}
        self._default = default

    def register(self, name: str, factory: EngineFactory) -> None:
        """Register (or replace) the factory for a driver name.

        Replacing a factory drops any engine already built from the old one.
        """
        if name in self._factories:
            logger.warning("Overwriting existing engine registration: %s", name)
            self._instances.pop(name, None)
        self._factories[name] = factory
        logger.info("Registered engine: %s", name)

    def engine(self, name: str | None = None) -> SearchEngine:
        """Get the engine for ``name``, building it on first use.

        Args:
            name: Driver name. Falls back to the registry default.

        Raises:
            EngineNotFoundError: If no factory is registered under this name.
        """
        name = name or self._default
        if name is None:
            raise EngineNotFoundError("No engine name given and no default engine configured.")

        if name not in self._instances:
            if name not in self._factories:
                raise EngineNotFoundError(
                    f"No engine registered with name '{name}'. "
                    f"Available engines: {list(self._factories.keys())}"
                )
            self._instances[name] = self._factories[name]()
            logger.info("Created engine: %s", name)
        return self._instances[name]

    def forget(self, name: str) -> None:
        """Drop a built engine so the next lookup creates a fresh one."""
        self._instances.pop(name, None)

    @property
    def registered_engines(self) -> list[str]:
        """List all registered driver names."""
        return list(self._factories.keys())

    @property
    def active_engines(self) -> list[str]:
        """List all driver names with a built engine."""
        return list(self._instances.keys())
