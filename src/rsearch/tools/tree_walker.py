"""
Directory tree walker for Recursive Search.

This module traverses a directory tree depth-first, reporting each entry
before descending into it, and classifies entries against a search's match
patterns. Symbolic links are followed. Entries within one directory are
reported in the order the operating system lists them.
"""

import os
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from ..errors import TraversalError
from .pattern_builder import MatchPatterns


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """
    A single entry reported by the walker.

    Attributes:
        name: Base name of the entry
        path: Full path of the entry as reached by the walk
        is_dir: Whether the entry is a directory, after following links
        is_file: Whether the entry is a regular file, after following links
    """
    name: str
    path: str
    is_dir: bool
    is_file: bool


class TreeWalker:
    """
    Self-first, depth-first directory walker.

    A directory is reported before any of its children. Symbolic links to
    directories are descended into, so content reachable through several
    links is reported once per link. There is no cycle detection: a link loop
    is followed until the operating system refuses to resolve the path, and
    the entry at that depth is then neither a file nor a directory.

    Failing to open or list a directory aborts the walk with a TraversalError
    naming the offending path. Directory handles are closed whether the walk
    completes, fails, or is abandoned by the caller.
    """

    def __init__(self):
        self._stats = {
            'entries_scanned': 0,
            'directories_traversed': 0,
            'files_matched': 0,
            'directories_matched': 0
        }

    def walk(self, start_directory: str) -> Iterator[WalkEntry]:
        """
        Walk the tree rooted at start_directory.

        Args:
            start_directory: Directory to walk; not itself reported

        Yields:
            WalkEntry for every entry below start_directory

        Raises:
            TraversalError: If a directory cannot be opened or listed
        """
        stack = [self._open_directory(start_directory)]
        try:
            while stack:
                try:
                    entry = next(stack[-1])
                except StopIteration:
                    stack.pop().close()
                    continue
                except OSError as e:
                    raise TraversalError(getattr(e, 'filename', None) or start_directory, str(e)) from e

                walk_entry = self._inspect(entry)
                self._stats['entries_scanned'] += 1
                yield walk_entry

                if walk_entry.is_dir:
                    stack.append(self._open_directory(walk_entry.path))
        finally:
            for iterator in stack:
                iterator.close()

    def collect(self, start_directory: str, patterns: MatchPatterns) -> Tuple[List[str], List[str]]:
        """
        Walk the tree and classify each entry against the match patterns.

        Directories are tested against the directory pattern and regular
        files against the file pattern. Other entries never match.

        Args:
            start_directory: Directory to walk
            patterns: Compiled patterns for this search

        Returns:
            Tuple of (matched file names, matched directory names)

        Raises:
            TraversalError: If the walk fails; no partial result is returned
        """
        files = []
        directories = []

        for entry in self.walk(start_directory):
            if entry.is_dir:
                if patterns.matches_directory(entry.name):
                    directories.append(entry.name)
                    self._stats['directories_matched'] += 1
            elif entry.is_file:
                if patterns.matches_file(entry.name):
                    files.append(entry.name)
                    self._stats['files_matched'] += 1

        logger.debug(f"Walk of {start_directory} finished: {self._stats}")
        return files, directories

    def _open_directory(self, path: str) -> Iterator[os.DirEntry]:
        """Open a directory for listing."""
        try:
            iterator = os.scandir(path)
        except OSError as e:
            raise TraversalError(path, str(e)) from e
        self._stats['directories_traversed'] += 1
        return iterator

    def _inspect(self, entry: os.DirEntry) -> WalkEntry:
        """
        Classify a directory entry, following symbolic links.

        An entry whose type cannot be determined (a link loop, for example)
        is neither a file nor a directory.
        """
        try:
            is_dir = entry.is_dir(follow_symlinks=True)
            is_file = not is_dir and entry.is_file(follow_symlinks=True)
        except OSError as e:
            logger.debug(f"Cannot determine type of {entry.path}: {e}")
            is_dir = is_file = False
        return WalkEntry(name=entry.name, path=entry.path, is_dir=is_dir, is_file=is_file)

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the walk.

        Returns:
            Dictionary containing walk statistics
        """
        return self._stats.copy()
