"""Model-side types shared by every engine."""

from xunscout.models.builder import OrderClause, SearchBuilder
from xunscout.models.results import SearchResults
from xunscout.models.searchable import Searchable, SearchableMixin

__all__ = ["OrderClause", "SearchBuilder", "SearchResults", "Searchable", "SearchableMixin"]
