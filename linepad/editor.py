"""Terminal front end: event loop, prompts and status line."""

import logging
import os
import select
import signal
from typing import Optional

from .commands import LoadDocument, NewDocument, SaveDocument
from .constants import EditorConstants
from .controller import EditorController
from .errors import DocumentNotFoundError, EditorError, NoFilePathError
from .keyboard import KeyboardHandler, KeyType, RawInputEvent, RawKeyEvent, RawTextEvent
from .settings import SettingsPersistence, get_persistence
from .terminal import TerminalInterface
from .view import TerminalView, compose_status

logger = logging.getLogger(__name__)

SAVE_PROMPT = "File to save in: "
OPEN_PROMPT = "File to open: "


class Editor:
    """Main editor application.

    Owns the terminal and the controller, translates keys into controller
    input, and handles the things that are not editing commands: quitting,
    asking for file names, and reporting errors on the status line.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[SettingsPersistence] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = TerminalView(num_columns=self.terminal.width)
        self.controller = EditorController(visible_rows=self.terminal.height)
        self.settings = settings or get_persistence()
        self.running = False
        self.error_mode = False  # True when terminal is too small
        self.status_message: Optional[str] = None
        self.prompt_mode: Optional[str] = None  # 'save_filename', 'save_filename_quit', 'open_filename', 'quit_confirm', 'new_confirm'
        self.prompt_input = ""
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    @property
    def filename(self) -> Optional[str]:
        return self.controller.document.file_path

    @property
    def modified(self) -> bool:
        return self.controller.document.is_dirty

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop."""
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        self.terminal.setup()
        self.running = True
        try:
            need_draw = True
            while self.running:
                if need_draw:
                    self._draw()
                    need_draw = False

                # Use file descriptor 0 for stdin to work in all environments
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                    self.terminal.invalidate_frame()
                    need_draw = True
                if 0 in ready:
                    # Drain every pending key before redrawing
                    for event in self.keyboard.drain_events():
                        self.handle_event(event)
                        if not self.running:
                            break
                    need_draw = True
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()
            self._remember_cursor()

    def _draw(self):
        """Draw the current editor state to terminal."""
        width, height = self.terminal.width, self.terminal.height
        if width < EditorConstants.MIN_TERMINAL_WIDTH or height + 1 < EditorConstants.MIN_TERMINAL_HEIGHT:
            self.error_mode = True
            self.terminal.draw_error_message(
                EditorConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                    EditorConstants.MIN_TERMINAL_WIDTH, EditorConstants.MIN_TERMINAL_HEIGHT),
                EditorConstants.CURRENT_SIZE_MESSAGE.format(width, height + 1),
            )
            return
        self.error_mode = False

        self.controller.set_visible_rows(height)
        self.view.num_columns = width
        frame = self.view.render(self.controller)

        prompt = self._prompt_text()
        if prompt is not None:
            status = " " + prompt
            status_cursor_x = len(status) if self.prompt_mode not in ('quit_confirm', 'new_confirm') else None
        else:
            message = f" {self.status_message}" if self.status_message else None
            status = compose_status(self.controller, width, message, hint=EditorConstants.HELP_HINT)
            status_cursor_x = None
        self.terminal.update_frame(frame.lines, frame.cursor_y, frame.cursor_x, status, status_cursor_x)

    def _prompt_text(self) -> Optional[str]:
        if self.prompt_mode in ('save_filename', 'save_filename_quit'):
            return SAVE_PROMPT + self.prompt_input
        if self.prompt_mode == 'open_filename':
            return OPEN_PROMPT + self.prompt_input
        if self.prompt_mode == 'quit_confirm':
            return "Save file? (y, n) "
        if self.prompt_mode == 'new_confirm':
            return "Discard changes? (y, n) "
        return None

    def handle_event(self, event: RawInputEvent):
        """Handle a raw keyboard event."""
        # Clear status message on any keypress (except in prompt mode)
        if self.status_message and not self.prompt_mode:
            self.status_message = None

        if self.prompt_mode:
            self._handle_prompt_mode(event)
            return

        if isinstance(event, RawKeyEvent):
            if event.key_type == KeyType.CTRL and event.value == 'q':
                self._handle_quit()
                return
            if self.error_mode:
                return
            if event.key_type == KeyType.CTRL and event.value == 'o':
                self.prompt_mode = 'open_filename'
                self.prompt_input = ""
                return
            if event.key_type == KeyType.CTRL and event.value == 's':
                self._handle_save()
                return
            if event.key_type == KeyType.CTRL and event.value == 'n':
                if self.modified:
                    self.prompt_mode = 'new_confirm'
                else:
                    self._start_new_document()
                return
        elif self.error_mode:
            return

        try:
            self.controller.handle_raw_input(event)
        except EditorError as e:
            self.status_message = f"Error: {e}"

    def _handle_prompt_mode(self, event: RawInputEvent):
        if self.prompt_mode in ('save_filename', 'save_filename_quit', 'open_filename'):
            self._handle_filename_prompt(event)
        elif self.prompt_mode == 'quit_confirm':
            self._handle_quit_confirm(event)
        elif self.prompt_mode == 'new_confirm':
            self._handle_new_confirm(event)

    def _handle_filename_prompt(self, event: RawInputEvent):
        """Handle keypress during a filename prompt."""
        if isinstance(event, RawTextEvent):
            if event.character.isprintable():
                self.prompt_input += event.character
            return
        if event.value == 'escape' or (event.key_type == KeyType.CTRL and event.value == 'g'):
            self.prompt_mode = None
            self.prompt_input = ""
        elif event.key_type == KeyType.SPECIAL and event.value == 'backspace':
            self.prompt_input = self.prompt_input[:-1]
        elif event.key_type == KeyType.SPECIAL and event.value == 'enter':
            if not self.prompt_input:
                return
            mode, name = self.prompt_mode, self.prompt_input
            self.prompt_mode = None
            self.prompt_input = ""
            if mode == 'open_filename':
                self.load_file(name, create_missing=False)
            elif self.save_file(name) and mode == 'save_filename_quit':
                self.running = False

    def _handle_quit(self):
        if self.modified:
            self.prompt_mode = 'quit_confirm'
        else:
            self.running = False

    def _handle_quit_confirm(self, event: RawInputEvent):
        """Handle keypress during quit confirmation."""
        char = event.character.lower() if isinstance(event, RawTextEvent) else ''
        if char == 'y':
            if self.filename:
                self.prompt_mode = None
                if self.save_file(self.filename):
                    self.running = False
            else:
                self.prompt_mode = 'save_filename_quit'
                self.prompt_input = ""
        elif char == 'n':
            self.prompt_mode = None
            self.running = False
        else:
            self.prompt_mode = None

    def _handle_new_confirm(self, event: RawInputEvent):
        char = event.character.lower() if isinstance(event, RawTextEvent) else ''
        self.prompt_mode = None
        if char == 'y':
            self._start_new_document()

    def _start_new_document(self):
        self._remember_cursor()
        self.controller.execute(NewDocument())
        self.status_message = "New document"

    def _handle_save(self):
        """Handle Ctrl-S save command."""
        if self.filename:
            self.save_file(self.filename)
        else:
            self.prompt_mode = 'save_filename'
            self.prompt_input = ""

    def load_file(self, filename: str, create_missing: bool = True) -> bool:
        """Load a file into the editor.

        Args:
            filename: Path to file to load
            create_missing: If the file does not exist, start an empty
                document that will be saved under this name

        Returns:
            True if the file was read
        """
        self._remember_cursor()
        try:
            self.controller.execute(LoadDocument(filename))
        except DocumentNotFoundError:
            if not create_missing:
                self.status_message = f"Error: No such file {filename}"
                return False
            self.controller.execute(NewDocument())
            self.controller.document.set_path(filename)
            self.status_message = f"New file {filename}"
            return False
        except (EditorError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load %s: %s", filename, e)
            self.status_message = f"Error: Cannot open {filename}"
            return False
        position = self.settings.load_cursor(filename)
        if position is not None:
            self.controller.set_cursor(*position)
        self.status_message = f"Opened {filename}"
        return True

    def save_file(self, filename: str) -> bool:
        """Save the current document to a file.

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            self.controller.execute(SaveDocument(filename))
        except NoFilePathError:
            self.prompt_mode = 'save_filename'
            self.prompt_input = ""
            return False
        except EditorError as e:
            self.status_message = f"Error: {e}"
            return False
        self._remember_cursor()
        self.status_message = f"Saved to {filename}"
        return True

    def _remember_cursor(self):
        if self.filename:
            cursor = self.controller.cursor
            self.settings.save_cursor(self.filename, cursor.row, cursor.col)
