"""Xunsearch engine driver."""

from xunscout.engines.xunsearch.backend import Document
from xunscout.engines.xunsearch.connections import ConnectionRegistry
from xunscout.engines.xunsearch.engine import XunsearchEngine
from xunscout.engines.xunsearch.ini import build_ini, build_model_ini

__all__ = ["ConnectionRegistry", "Document", "XunsearchEngine", "build_ini", "build_model_ini"]
