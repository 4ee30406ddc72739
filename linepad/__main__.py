"""linepad CLI entry point.

Allows running via `python -m linepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys

from .constants import EditorConstants
from .version import get_version_string

USAGE = "usage: linepad [--version | --keytest] [FILE]"


def _configure_logging() -> None:
    """Send debug logging to the file named by $LINEPAD_LOG, if set.

    The terminal belongs to the editor, so nothing is logged to stderr.
    """
    log_path = os.environ.get(EditorConstants.LOG_FILE_ENV)
    root = logging.getLogger("linepad")
    if not log_path:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def _escape(s: str) -> str:
    """Return a printable representation of a raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print the raw event and mapped command for each key. Quit with ESC."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType, RawKeyEvent
    from .keymap import KeyCommandMapper

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    mapper = KeyCommandMapper()
    try:
        while True:
            event = kb.get_event(timeout=None)
            if event is None:
                continue
            if isinstance(event, RawKeyEvent) and event.key_type == KeyType.SPECIAL and event.value == 'escape':
                print("Exiting keyboard test.\r")
                break
            print(f"{event!r} raw='{_escape(event.raw)}' -> {mapper.try_map(event)!r}\r")
    finally:
        term.cleanup()


def main() -> None:
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return
    _configure_logging()
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor()
    if args:
        editor.load_file(args[0])
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
