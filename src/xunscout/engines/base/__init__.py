"""Base engine interface — Abstract classes for search engine drivers."""

from xunscout.engines.base.engine import SearchEngine
from xunscout.engines.base.registry import EngineRegistry

__all__ = ["EngineRegistry", "SearchEngine"]
