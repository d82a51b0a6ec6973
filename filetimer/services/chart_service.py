"""Service for top-files chart data."""
from typing import Dict, List
from .presentation_service import FileRow, sort_rows


def top_files(snapshot: Dict[str, int], limit: int = 5) -> List[FileRow]:
    """
    Get the files with the largest totals.

    Returns:
        Up to `limit` rows sorted by seconds descending; ties keep
        enumeration order
    """
    if limit <= 0:
        return []
    return sort_rows(snapshot, descending=True)[:limit]
