"""
Search logic for SmartSearch.

Matching, the pure event handlers built on it and the dispatcher that carries
out their actions.
"""

from .matcher import search, resolve_name
from .dispatcher import Dispatcher, SearchView

__all__ = ['search', 'resolve_name', 'Dispatcher', 'SearchView']
