"""
Search tools for Recursive Search.

This module contains the building blocks of a search: splitting the query,
deriving the match patterns, and walking the directory tree.
"""

from .query_splitter import split_query
from .pattern_builder import MatchPatterns, build_patterns
from .tree_walker import TreeWalker, WalkEntry

__all__ = [
    'split_query',
    'MatchPatterns',
    'build_patterns',
    'TreeWalker',
    'WalkEntry'
]
