"""
Search query data models for Recursive Search.

This module defines the data structures describing a single search call:
the raw request as given by the caller and the query derived from it once
the search string has been split into a start directory and a base name.
"""

from typing import Iterable, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_EXTENSIONS: Tuple[str, ...] = ('jpg', 'png', 'gif', 'pdf', 'doc', 'csv', 'xml', 'json')


def normalize_extensions(extensions: Union[str, Iterable[str]]) -> List[str]:
    """
    Normalize a collection of file extensions.

    Strips surrounding whitespace and a single leading dot, lower-cases each
    value, drops empty entries and removes duplicates while keeping the order
    in which extensions were first seen.

    Args:
        extensions: A single extension or an iterable of extensions

    Returns:
        List of normalized extensions
    """
    if isinstance(extensions, str):
        extensions = [extensions]

    normalized = []
    for ext in extensions:
        if not isinstance(ext, str):
            raise ValueError(f"Extension must be a string, got {type(ext).__name__}")
        ext = ext.strip()
        if ext.startswith('.'):
            ext = ext[1:]
        ext = ext.lower()
        if ext and ext not in normalized:
            normalized.append(ext)
    return normalized


class SearchRequest(BaseModel):
    """
    Represents one call to the searcher.

    The distinction between ``allowed_extensions=None`` and an empty tuple is
    significant: ``None`` means "use the searcher's configured defaults" while
    an empty tuple disables extension filtering for this call.

    Attributes:
        raw_query: Search string, either a bare name or a path
        allowed_extensions: Extension override for this call, or None
        starting_directory: Directory used when raw_query is a bare name
    """

    model_config = ConfigDict(frozen=True)

    raw_query: str = Field(..., description="Bare name or path to search for")
    allowed_extensions: Optional[Tuple[str, ...]] = Field(None, description="Extension override")
    starting_directory: str = Field(..., min_length=1, description="Default start directory")

    @field_validator('allowed_extensions', mode='before')
    @classmethod
    def validate_allowed_extensions(cls, v) -> Optional[Tuple[str, ...]]:
        """Normalize extensions, keeping None distinct from empty."""
        if v is None:
            return None
        return tuple(normalize_extensions(v))

    def uses_default_extensions(self) -> bool:
        """Check if this request defers to the configured default extensions."""
        return self.allowed_extensions is None

    def __str__(self) -> str:
        parts = [f"Query: '{self.raw_query}'", f"Start: {self.starting_directory}"]
        if self.uses_default_extensions():
            parts.append("Extensions: defaults")
        elif self.allowed_extensions:
            parts.append(f"Extensions: {', '.join(self.allowed_extensions)}")
        else:
            parts.append("Extensions: any")
        return " | ".join(parts)


class DerivedQuery(BaseModel):
    """
    Result of splitting a raw search string.

    Attributes:
        base_name: Final path segment of the query, matched against entry names
        start_directory: Directory the tree walk starts from
    """

    model_config = ConfigDict(frozen=True)

    base_name: str = Field(..., description="Name fragment to match")
    start_directory: str = Field(..., description="Directory to walk")

    def has_base_name(self) -> bool:
        """Check if the query names anything beyond a directory."""
        return self.base_name != ""
