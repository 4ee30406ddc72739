"""A line buffer bound to an optional file path."""

from __future__ import annotations

import os
from typing import Optional

from .buffer import LineBuffer
from .constants import EditorConstants


class Document:
    """The buffer being edited, where it lives on disk, and whether it changed."""

    def __init__(self, buffer: Optional[LineBuffer] = None, file_path: Optional[str] = None):
        self.buffer = buffer if buffer is not None else LineBuffer()
        self.file_path = file_path
        self.is_dirty = False

    def mark_dirty(self) -> None:
        self.is_dirty = True

    def mark_clean(self) -> None:
        self.is_dirty = False

    def set_path(self, path: Optional[str]) -> None:
        self.file_path = path
        self.mark_clean()

    @property
    def display_name(self) -> str:
        if self.file_path is None:
            return EditorConstants.UNTITLED_NAME
        return os.path.basename(self.file_path) or self.file_path
