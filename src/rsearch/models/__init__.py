"""
Data models for Recursive Search.

This module contains the core data structures used throughout the system.
"""

from .search_query import SearchRequest, DerivedQuery, DEFAULT_EXTENSIONS, normalize_extensions
from .search_results import SearchResult
from .config import SearcherConfig

__all__ = [
    'SearchRequest',
    'DerivedQuery',
    'DEFAULT_EXTENSIONS',
    'normalize_extensions',
    'SearchResult',
    'SearcherConfig'
]
