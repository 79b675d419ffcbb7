"""Editr - a small terminal text editor."""

from .document import Document, Position
from .line import Line
from .viewport import Direction, Viewport

__all__ = [
    'Document',
    'Position',
    'Line',
    'Direction',
    'Viewport',
]
