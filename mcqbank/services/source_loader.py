# mcqbank/services/source_loader.py
import json
import os
from typing import Optional

from mcqbank.exceptions import SourceLoadError
from mcqbank.models.lesson import SourceNode

def load_source_tree(base_dir: str) -> SourceNode:
    """
    Reads a directory of lesson files into a source tree.

    Sub-directories become groups and every ``*.json`` file becomes a leaf named
    after the file stem. Entries are visited in sorted order so the resulting
    index order does not depend on the filesystem. A file that cannot be read or
    decoded becomes a leaf carrying the error instead of a payload; only an
    unreadable root raises.
    """
    if not os.path.isdir(base_dir):
        raise SourceLoadError(f"Question source directory not found: {base_dir}")
    try:
        return _walk(base_dir, os.path.basename(os.path.normpath(base_dir)))
    except OSError as e:
        raise SourceLoadError(f"Could not read question source {base_dir}: {e}") from e

def _walk(directory: str, name: str) -> SourceNode:
    children = []
    for entry in sorted(os.listdir(directory)):
        full_path = os.path.join(directory, entry)
        if os.path.isdir(full_path):
            children.append(_walk(full_path, entry))
        elif entry.endswith(".json"):
            children.append(_read_leaf(full_path, entry[:-len(".json")]))
    return SourceNode(name=name, children=children, path=directory)

def _read_leaf(path: str, name: str) -> SourceNode:
    error: Optional[str] = None
    payload = None
    try:
        with open(path, mode="r", encoding="utf-8") as f:
            payload = json.load(f)
    except (ValueError, OSError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        error = str(e)
    return SourceNode(name=name, payload=payload, error=error, path=path)
