"""
Data models for SmartSearch.

This module contains all the core data structures used throughout the system.
"""

from .settings import Settings
from .search_query import SearchQuery
from .search_results import BROWSER_ITEM_TEXT, MatchResult, MatchType, ResultView

__all__ = [
    'Settings',
    'SearchQuery',
    'BROWSER_ITEM_TEXT',
    'MatchResult',
    'MatchType',
    'ResultView',
]
