"""
Pattern building for Recursive Search.

This module derives the two regular expressions a search uses: one for file
names and one for directory names. Both accept a name made of a run of
``[a-z0-9-. ]`` characters, then the query, then a run of ``[a-z0-9-]``
characters. The file pattern may additionally require one of the allowed
extensions.

The query is interpolated into the pattern as-is, so regex metacharacters in
it keep their regex meaning. Pass ``escape=True`` to match it literally.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import PatternCompilationError


logger = logging.getLogger(__name__)


LEADING_CHARS = r'[a-z0-9\-. ]*'
TRAILING_CHARS = r'(?:[a-z0-9\-])*'


@dataclass(frozen=True)
class MatchPatterns:
    """
    Compiled patterns for one search.

    Attributes:
        file_pattern: Pattern applied to file base names
        directory_pattern: Pattern applied to directory base names
    """
    file_pattern: re.Pattern
    directory_pattern: re.Pattern

    def matches_file(self, name: str) -> bool:
        """Check if a file base name matches."""
        return self.file_pattern.fullmatch(name) is not None

    def matches_directory(self, name: str) -> bool:
        """Check if a directory base name matches."""
        return self.directory_pattern.fullmatch(name) is not None


def create_extension_pattern(extensions: Iterable[str]) -> Optional[str]:
    """
    Create the extension suffix pattern for a set of extensions.

    Args:
        extensions: Normalized extensions without leading dots

    Returns:
        Pattern such as ``\\.(?:jpg|png)+``, or None if there are no extensions
    """
    extensions = list(extensions)
    if not extensions:
        return None
    return r'\.(?:' + '|'.join(re.escape(ext) for ext in extensions) + ')+'


def has_extension(base_name: str, extension_pattern: str) -> bool:
    """Check if a base name already ends in one of the allowed extensions."""
    return re.search(extension_pattern + r'\Z', base_name, re.IGNORECASE) is not None


def create_base_pattern(base_name: str, escape: bool = False) -> str:
    """
    Create the pattern shared by files and directories.

    Args:
        base_name: Name fragment to search for
        escape: Whether to escape regex metacharacters in base_name

    Returns:
        Pattern text, to be evaluated with a full match
    """
    fragment = re.escape(base_name) if escape else base_name
    return LEADING_CHARS + '(?:' + fragment + ')' + TRAILING_CHARS


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a derived pattern case-insensitively.

    Raises:
        PatternCompilationError: If the pattern is not a valid regex
    """
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise PatternCompilationError(pattern, str(e)) from e


def build_patterns(base_name: str, extensions: Iterable[str], escape: bool = False) -> MatchPatterns:
    """
    Build the file and directory patterns for a search.

    The extension suffix is only appended to the file pattern when extensions
    are given and base_name does not already end in one of them.

    Args:
        base_name: Name fragment to search for
        extensions: Allowed extensions for files, empty for no filtering
        escape: Whether to escape regex metacharacters in base_name

    Returns:
        MatchPatterns holding both compiled patterns

    Raises:
        PatternCompilationError: If base_name makes either pattern invalid
    """
    base_pattern = create_base_pattern(base_name, escape=escape)

    file_pattern = base_pattern
    extension_pattern = create_extension_pattern(extensions)
    if extension_pattern and not has_extension(base_name, extension_pattern):
        file_pattern += extension_pattern

    logger.debug(f"File pattern: {file_pattern}")
    logger.debug(f"Directory pattern: {base_pattern}")

    return MatchPatterns(
        file_pattern=compile_pattern(file_pattern),
        directory_pattern=compile_pattern(base_pattern)
    )
