"""
Query splitting for Recursive Search.

Turns a raw search string into the base name to match and the directory the
walk should start from.
"""

import os
import logging
from pathlib import Path

from ..errors import InvalidPathError
from ..models.search_query import DerivedQuery


logger = logging.getLogger(__name__)


def split_query(raw_query: str, default_directory: str) -> DerivedQuery:
    """
    Split a search string into a base name and a start directory.

    ``"/contents/images/file"`` starts in the canonical ``/contents/images``
    and searches for ``file``. A bare ``"file"`` or ``"file.jpg"`` starts in
    ``default_directory``. A trailing separator leaves an empty base name.

    Args:
        raw_query: Bare name or path to search for
        default_directory: Directory used when raw_query has no directory part

    Returns:
        DerivedQuery with the base name and resolved start directory

    Raises:
        InvalidPathError: If the directory part does not exist
    """
    head, base_name = os.path.split(raw_query)

    if not head:
        return DerivedQuery(base_name=raw_query, start_directory=default_directory)

    try:
        start_directory = str(Path(head).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(head, str(e)) from e

    query = DerivedQuery(base_name=base_name, start_directory=start_directory)
    if query.has_base_name():
        logger.debug(f"Split query '{raw_query}' into '{base_name}' under {start_directory}")
    else:
        logger.debug(f"Query '{raw_query}' names only a directory, matching on character classes under {start_directory}")
    return query
