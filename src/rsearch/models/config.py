"""
Configuration data models for Recursive Search.

This module defines the settings a searcher is constructed from: the default
start directory, the default allowed extensions and the query escaping mode.
"""

import os
from pathlib import Path
from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator

from .search_query import DEFAULT_EXTENSIONS, normalize_extensions


class SearcherConfig(BaseModel):
    """
    Configuration for a Searcher instance.

    All fields are read-only once a searcher has been built from them.

    Attributes:
        default_directory: Directory searched when the query is a bare name
        allowed_extensions: Extensions applied to file matches by default
        escape_query: Treat the query as a literal string instead of a regex fragment
    """

    default_directory: str = Field(default_factory=os.getcwd, description="Default start directory")
    allowed_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Default allowed file extensions"
    )
    escape_query: bool = Field(False, description="Escape regex metacharacters in the query")

    @field_validator('default_directory')
    @classmethod
    def validate_default_directory(cls, v: str) -> str:
        """Expand user path but keep the directory otherwise unchanged."""
        if not v or not v.strip():
            raise ValueError("Default directory cannot be empty")
        if v.startswith('~'):
            return str(Path(v).expanduser())
        return v

    @field_validator('allowed_extensions', mode='before')
    @classmethod
    def validate_allowed_extensions(cls, v) -> List[str]:
        """Normalize the default extension list."""
        if v is None:
            return []
        return normalize_extensions(v)

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for settings worth warning about.

        Returns:
            List of warning messages (empty if nothing stands out)
        """
        warnings = []

        if not os.path.isdir(self.default_directory):
            warnings.append(f"Default directory does not exist or is not a directory: {self.default_directory}")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearcherConfig':
        """Create a SearcherConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        extensions = ', '.join(self.allowed_extensions) if self.allowed_extensions else 'any'
        return f"SearcherConfig(directory={self.default_directory}, extensions=[{extensions}], escape={self.escape_query})"
