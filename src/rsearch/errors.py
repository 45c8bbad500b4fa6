"""
Exception types for Recursive Search.

Every failure of a search call is surfaced synchronously through one of these
exceptions. No partial results are ever returned alongside an error.
"""

from typing import Optional


class SearchError(Exception):
    """Base class for all search failures."""
    pass


class InvalidPathError(SearchError):
    """
    Raised when the directory component of a search string does not resolve.

    Attributes:
        path: The directory component that failed to resolve
        reason: Underlying error message, if any
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Search path does not exist: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TraversalError(SearchError):
    """
    Raised when the filesystem reports an error while walking the tree.

    Attributes:
        path: The directory or entry that could not be read
        reason: Underlying error message, if any
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot traverse {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PatternCompilationError(SearchError):
    """
    Raised when a derived match pattern is not a valid regular expression.

    Attributes:
        pattern: The full pattern text that failed to compile
        reason: Message reported by the regex engine
    """

    def __init__(self, pattern: str, reason: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid search pattern '{pattern}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
