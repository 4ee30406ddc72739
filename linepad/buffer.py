"""Line-oriented text buffer."""

from __future__ import annotations

import logging
import os
import re
import tempfile

from .constants import EditorConstants
from .errors import DocumentNotFoundError, DocumentSaveError

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile("|".join(re.escape(sep) for sep in EditorConstants.LINE_SEPARATORS))


def split_lines(text: str) -> list[str]:
    """Split text into logical lines on CRLF, CR or LF.

    Empty text yields a single empty line, and a trailing separator yields
    a trailing empty line, so joining the result with LF restores the text
    up to line-ending normalization.
    """
    return _LINE_BREAK.split(text)


class LineBuffer:
    """Ordered sequence of lines; always holds at least one line.

    Positions are ``(row, col)`` with ``0 <= row < line_count`` and
    ``0 <= col <= len(line)``. Passing a position outside those bounds is a
    programming error and raises IndexError.
    """

    def __init__(self, lines: list[str] | None = None):
        self._lines: list[str] = list(lines) if lines else [""]
        for line in self._lines:
            if _LINE_BREAK.search(line):
                raise ValueError(f"line contains a line separator: {line!r}")

    def _check_row(self, row: int) -> str:
        if not 0 <= row < len(self._lines):
            raise IndexError(f"row {row} out of range (line count {len(self._lines)})")
        return self._lines[row]

    def _check_position(self, row: int, col: int) -> str:
        line = self._check_row(row)
        if not 0 <= col <= len(line):
            raise IndexError(f"column {col} out of range for row {row} (length {len(line)})")
        return line

    # Mutations

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert ``ch`` before position ``col`` on ``row``.

        ``ch`` must be a single character other than CR or LF; line breaks
        go through ``insert_newline``.
        """
        if len(ch) != 1 or ch in "\r\n":
            raise ValueError(f"expected a single non-newline character, got {ch!r}")
        line = self._check_position(row, col)
        self._lines[row] = line[:col] + ch + line[col:]

    def delete_char(self, row: int, col: int) -> None:
        """Delete the character before ``col``, merging lines at column 0.

        At ``(0, 0)`` nothing precedes the cursor and the call does nothing.
        """
        line = self._check_position(row, col)
        if col > 0:
            self._lines[row] = line[:col - 1] + line[col:]
        elif row > 0:
            self._lines[row - 1] += line
            del self._lines[row]

    def insert_newline(self, row: int, col: int) -> None:
        """Split ``row`` at ``col``; the right part becomes the next line."""
        line = self._check_position(row, col)
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    # Queries

    def get_line(self, row: int) -> str:
        return self._check_row(row)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def line_length(self, row: int) -> int:
        return len(self._check_row(row))

    # Whole document

    def get_text(self) -> str:
        return EditorConstants.SAVE_LINE_SEPARATOR.join(self._lines)

    def set_text(self, text: str) -> None:
        """Replace the whole document with ``text``."""
        self._lines = split_lines(text)

    def load_from_file(self, path: str) -> None:
        """Replace the document with the contents of ``path``.

        Raises:
            DocumentNotFoundError: if ``path`` does not exist. The buffer is
                left untouched.
        """
        try:
            with open(path, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
                content = f.read()
        except FileNotFoundError:
            raise DocumentNotFoundError(path) from None
        self.set_text(content)
        logger.info("Loaded %s (%d lines)", path, len(self._lines))

    def save_to_file(self, path: str) -> None:
        """Write the document to ``path`` atomically.

        The text goes to a temporary file in the target directory which is
        then renamed over ``path``.

        Raises:
            DocumentSaveError: if the file cannot be written.
        """
        content = self.get_text()
        dir_name = os.path.dirname(path) or '.'
        base_name = os.path.basename(path)
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                             dir=dir_name, newline='',
                                             prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
                                             suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, path)
        except OSError as e:
            if temp_filename is not None and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_filename)
            reason = e.strerror or str(e)
            raise DocumentSaveError(path, reason) from e
        logger.info("Saved %s (%d lines)", path, len(self._lines))
