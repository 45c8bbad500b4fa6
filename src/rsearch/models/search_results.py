"""
Search results data models for Recursive Search.

This module defines the result of a single search: the base names of the
matched files and directories, in the order the tree walk visited them.
"""

from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """
    Matches collected by one search.

    Files and directories are accumulated into separate lists, each in
    traversal-visit order. Entries are base names only, without any path
    prefix.

    Attributes:
        files: Base names of matched files
        directories: Base names of matched directories
        base_name: Name fragment that was searched for
        start_directory: Directory the walk started from
        entries_scanned: Number of entries visited by the walk
    """

    files: List[str] = Field(default_factory=list, description="Matched file names")
    directories: List[str] = Field(default_factory=list, description="Matched directory names")
    base_name: str = Field("", description="Name fragment that was searched for")
    start_directory: str = Field(..., description="Directory the walk started from")
    entries_scanned: int = Field(0, ge=0, description="Number of entries visited")

    def total_matches(self) -> int:
        """Get the combined number of matched files and directories."""
        return len(self.files) + len(self.directories)

    def has_matches(self) -> bool:
        """Check if the search matched anything."""
        return self.total_matches() > 0

    def as_tuple(self) -> Tuple[List[str], List[str]]:
        """Get the ``(files, directories)`` pair."""
        return list(self.files), list(self.directories)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary representation."""
        data = self.model_dump()
        data['total_matches'] = self.total_matches()
        return data

    def __str__(self) -> str:
        return (
            f"Search '{self.base_name}' in {self.start_directory}: "
            f"{len(self.files)} files, {len(self.directories)} directories "
            f"({self.entries_scanned} entries scanned)"
        )
