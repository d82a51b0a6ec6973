"""Service for building and writing JSON time reports."""
import json
import os
from typing import Dict
from ..config import EXPORT_ALL_FILENAME, EXPORT_FILE_SUFFIX
from ..models import display_name


def export_all_payload(store) -> Dict[str, int]:
    """Every known path mapped to its total seconds."""
    return store.snapshot()


def export_file_payload(store, path: str) -> Dict[str, int]:
    """Single-entry report for one path."""
    return {path: store.get(path)}


def default_export_name(path: str = "") -> str:
    """Suggested save-dialog filename for an all-files or single-file report."""
    if not path:
        return EXPORT_ALL_FILENAME
    return f"{display_name(path)}{EXPORT_FILE_SUFFIX}"


def write_report(payload: Dict[str, int], destination: str) -> None:
    """
    Write a report as UTF-8 JSON with 2-space indentation.

    Args:
        payload: Mapping of path to seconds
        destination: Target file path (parent directory is created)
    """
    directory = os.path.dirname(destination)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(destination, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
