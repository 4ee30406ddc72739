"""linepad - A small line-oriented text editor."""

from .buffer import LineBuffer
from .controller import EditorController
from .cursor import CursorState
from .viewport import Viewport, reconcile

__all__ = [
    'LineBuffer',
    'EditorController',
    'CursorState',
    'Viewport',
    'reconcile',
]
