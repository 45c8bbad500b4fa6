"""
Recursive Search - Core Package

Finds files and directories by name across a directory tree, matching base
names against a pattern derived from the search string.
"""

from .errors import SearchError, InvalidPathError, TraversalError, PatternCompilationError
from .searcher import Searcher, search, search_files, search_directories

__version__ = "0.1.0"

__all__ = [
    'Searcher',
    'search',
    'search_files',
    'search_directories',
    'SearchError',
    'InvalidPathError',
    'TraversalError',
    'PatternCompilationError'
]
