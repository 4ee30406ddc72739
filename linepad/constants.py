"""Constants and configuration for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""
    
    # Line endings
    LINE_SEPARATORS = ("\r\n", "\r", "\n")  # Recognized when loading, longest first
    SAVE_LINE_SEPARATOR = "\n"  # Used when saving
    
    # Keyboard timing
    KEY_POLL_TIMEOUT = 0.0  # Timeout when draining pending keys (seconds)
    
    # Terminal requirements
    MIN_TERMINAL_WIDTH = 20  # Minimum terminal width required for display
    MIN_TERMINAL_HEIGHT = 3  # At least two text rows plus the status line
    
    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
    FILE_ENCODING = "utf-8"
    
    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    
    # Logging
    LOG_FILE_ENV = "LINEPAD_LOG"  # Environment variable naming a debug log file
    
    # Status messages
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {}x{}."
    CURRENT_SIZE_MESSAGE = "Current size: {}x{}."
    HELP_HINT = "^S Save  ^O Open  ^N New  ^Q Quit"
    UNTITLED_NAME = "[untitled]"
