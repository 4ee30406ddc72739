#!/usr/bin/env python3
"""linepad - A small line-oriented text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move cursor (up/down remember the column)
    Backspace / Delete: Delete before / at the cursor, joining lines at the edges
    Enter: Split the line
    Ctrl-S: Save file
    Ctrl-O: Open file
    Ctrl-N: New document
    Ctrl-Q: Quit (prompts to save if modified)
"""

from linepad.__main__ import main


if __name__ == "__main__":
    main()
