"""
Search facade for Recursive Search.

The Searcher ties the query splitter, the pattern builder and the tree walker
together. Module-level helpers run a one-off search without keeping a
Searcher around.
"""

import os
import logging
from typing import Iterable, List, Optional, Tuple, Union

from .models.config import SearcherConfig
from .models.search_query import DEFAULT_EXTENSIONS, SearchRequest, normalize_extensions
from .models.search_results import SearchResult
from .tools.pattern_builder import build_patterns
from .tools.query_splitter import split_query
from .tools.tree_walker import TreeWalker


logger = logging.getLogger(__name__)


class Searcher:
    """
    Recursively searches for files and directories by name.

    A searcher holds only its defaults: the start directory used for bare
    names, the extensions applied to file matches, and whether queries are
    escaped. These are read-only after construction, so one instance can be
    shared between threads; every call builds its own patterns and walker.
    """

    def __init__(self, directory: Optional[str] = None,
                 allowed_extensions: Optional[Iterable[str]] = None,
                 escape_query: bool = False):
        """
        Initialize the searcher.

        Args:
            directory: Default start directory; the current directory if None
            allowed_extensions: Default extensions for file matches; the
                built-in list if None, no filtering if empty
            escape_query: Match queries literally instead of as regex fragments
        """
        self._directory = os.fspath(directory) if directory is not None else os.getcwd()
        if allowed_extensions is None:
            allowed_extensions = DEFAULT_EXTENSIONS
        self._allowed_extensions = tuple(normalize_extensions(allowed_extensions))
        self._escape_query = escape_query

    @classmethod
    def from_config(cls, config: SearcherConfig) -> 'Searcher':
        """Create a searcher from a SearcherConfig."""
        return cls(
            directory=config.default_directory,
            allowed_extensions=config.allowed_extensions,
            escape_query=config.escape_query
        )

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def allowed_extensions(self) -> Tuple[str, ...]:
        return self._allowed_extensions

    @property
    def escape_query(self) -> bool:
        return self._escape_query

    def run(self, name: Union[str, os.PathLike],
            allowed_extensions: Optional[Iterable[str]] = None) -> SearchResult:
        """
        Search for files and directories matching name.

        Args:
            name: Bare name or path; a directory part overrides the default
                start directory
            allowed_extensions: Extensions for this call only; the searcher's
                defaults if None, no filtering if empty

        Returns:
            SearchResult with matches in traversal order

        Raises:
            InvalidPathError: If the directory part of name does not exist
            PatternCompilationError: If name yields an invalid regex
            TraversalError: If the tree cannot be walked
        """
        request = SearchRequest(
            raw_query=os.fspath(name),
            allowed_extensions=allowed_extensions,
            starting_directory=self._directory
        )

        query = split_query(request.raw_query, request.starting_directory)

        if request.uses_default_extensions():
            extensions = self._allowed_extensions
        else:
            extensions = request.allowed_extensions

        patterns = build_patterns(query.base_name, extensions, escape=self._escape_query)

        logger.info(f"Searching {query.start_directory} for '{query.base_name}'")
        walker = TreeWalker()
        files, directories = walker.collect(query.start_directory, patterns)

        return SearchResult(
            files=files,
            directories=directories,
            base_name=query.base_name,
            start_directory=query.start_directory,
            entries_scanned=walker.get_stats()['entries_scanned']
        )

    def find(self, name: Union[str, os.PathLike],
             allowed_extensions: Optional[Iterable[str]] = None) -> Tuple[List[str], List[str]]:
        """
        Search for files and directories matching name.

        Extensions only apply to files.

        Returns:
            Tuple of (matched file names, matched directory names)
        """
        return self.run(name, allowed_extensions).as_tuple()

    def __repr__(self) -> str:
        return (
            f"Searcher(directory={self._directory!r}, "
            f"allowed_extensions={self._allowed_extensions!r}, escape_query={self._escape_query})"
        )


def search(query: Union[str, os.PathLike],
           allowed_extensions: Optional[Iterable[str]] = None,
           starting_directory: Optional[str] = None) -> Tuple[List[str], List[str]]:
    """
    Search for files and directories without keeping a Searcher.

    Args:
        query: Bare name or path to search for
        allowed_extensions: Extensions for file matches; defaults if None
        starting_directory: Start directory for bare names; current directory if None

    Returns:
        Tuple of (matched file names, matched directory names)
    """
    searcher = Searcher(directory=starting_directory)
    return searcher.find(query, allowed_extensions)


def search_files(query: Union[str, os.PathLike],
                 allowed_extensions: Optional[Iterable[str]] = None,
                 starting_directory: Optional[str] = None) -> List[str]:
    """Search for matching files only. See search()."""
    files, _ = search(query, allowed_extensions, starting_directory)
    return files


def search_directories(query: Union[str, os.PathLike],
                       starting_directory: Optional[str] = None) -> List[str]:
    """Search for matching directories only. See search()."""
    _, directories = search(query, starting_directory=starting_directory)
    return directories
