"""Line buffer abstractions for structure-preserving file edits."""

from .document import LineDocument, LinePredicate
from .io import load_document, save_document
from .state import Cursor
from .validation import ensure_index, ensure_insert_index

__all__ = [
    "LineDocument",
    "LinePredicate",
    "Cursor",
    "load_document",
    "save_document",
    "ensure_index",
    "ensure_insert_index",
]
