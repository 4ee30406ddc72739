"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
import blessed
from typing import Optional

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False
        # Virtual screen state for minimal updates
        self._last_lines: list[str] | None = None
        self._last_status: str | None = None
        self._saved_termios: Optional[list] = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self.invalidate_frame()
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception as e:
                # stdin is not a tty (CI, pipes); run without keyboard input
                logger.warning("Could not initialize curtsies input: %s", e)
                self._curtsies_input = None
                self._curtsies_active = False
        self._disable_flow_control()

    def _disable_flow_control(self) -> None:
        """Let Ctrl-S, Ctrl-Q and Ctrl-O reach the editor.

        IXON/IXOFF make the tty swallow Ctrl-S/Ctrl-Q, and IEXTEN makes some
        platforms treat Ctrl-O as DISCARD and Ctrl-V as LNEXT.
        """
        try:
            old_settings = termios.tcgetattr(sys.stdin)
        except (termios.error, OSError, ValueError) as e:
            logger.debug("Not adjusting terminal flags: %s", e)
            return
        new_settings = list(old_settings)
        new_settings[0] &= ~(termios.IXON | termios.IXOFF)
        new_settings[3] &= ~termios.IEXTEN
        try:
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, OSError) as e:
            logger.warning("Could not disable flow control: %s", e)
            return
        self._saved_termios = old_settings

    def _restore_termios(self) -> None:
        if self._saved_termios is None:
            return
        try:
            termios.tcsetattr(sys.stdin, termios.TCSANOW, self._saved_termios)
        except (termios.error, OSError) as e:
            logger.warning("Could not restore terminal flags: %s", e)
        self._saved_termios = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        self._restore_termios()
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception as e:
                # Teardown must not mask the exception that ended the loop
                logger.warning("Could not restore terminal input mode: %s", e)
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def invalidate_frame(self) -> None:
        """Forget the last frame so the next update repaints everything."""
        self._last_lines = None
        self._last_status = None

    def update_frame(
        self,
        lines: list[str],
        cursor_y: int,
        cursor_x: int,
        status_text: str,
        status_cursor_x: Optional[int] = None,
    ) -> None:
        """Diff against last frame and write only changed rows.

        Args:
            lines: Text rows to show, at most ``height`` of them
            cursor_y: Cursor row on screen (0-based)
            cursor_x: Cursor column on screen (0-based)
            status_text: Content of the bottom line
            status_cursor_x: If given, put the cursor on the status line at
                this column instead (used while prompting)
        """
        rows = self.height
        width = self.width
        padded = [line[:width].ljust(width) for line in lines[:rows]]
        padded += [" " * width] * (rows - len(padded))

        if self._last_lines is None or len(self._last_lines) != rows:
            print(self.term.home + self.term.clear, end='')
            self._last_lines = ["" for _ in range(rows)]
            self._last_status = None

        for y, line in enumerate(padded):
            if line != self._last_lines[y]:
                print(self.term.move(y, 0) + line, end='')
                self._last_lines[y] = line

        status = status_text[:width].ljust(width)
        if status != self._last_status:
            print(self.term.move(self.term.height - 1, 0) + self.term.reverse + status + self.term.normal, end='')
            self._last_status = status

        if status_cursor_x is not None:
            print(self.term.move(self.term.height - 1, status_cursor_x) + self.term.normal_cursor, end='', flush=True)
        else:
            print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the center of the screen.

        Args:
            message1: Primary error message
            message2: Secondary information
        """
        print(self.term.home + self.term.clear, end='')
        self.invalidate_frame()
        center_y = self.term.height // 2
        for offset, message in enumerate((message1, message2)):
            if not message:
                continue
            x = max(0, (self.term.width - len(message)) // 2)
            print(self.term.move(center_y - 1 + offset, x) + message[:self.term.width], end='')
        help_text = "Ctrl-Q to quit | Resize terminal to continue"
        help_pos = max(0, (self.term.width - len(help_text)) // 2)
        print(self.term.move(self.term.height - 1, help_pos) + help_text[:self.term.width], end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))
        # send() also returns keys curtsies has already buffered, which a
        # select() on stdin would miss
        evt = self._curtsies_input.send(float(timeout))  # type: ignore
        return str(evt) if evt is not None else None

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
