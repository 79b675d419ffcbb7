"""Constants and configuration for the editr editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Quit confirmation
    QUIT_TIMES = 2  # Extra Ctrl-Q presses required when the document is dirty

    # Status messages
    STATUS_MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible
    HELP_MESSAGE = "HELP: Ctrl-F = find | Ctrl-S = save | Ctrl-Q = quit"
    QUIT_WARNING_MESSAGE = "WARNING! File has unsaved changes. Press Ctrl-Q {} more times to quit."
    OPEN_ERROR_MESSAGE = "ERR: Could not open file: {}"
    SAVE_OK_MESSAGE = "File saved successfully."
    SAVE_ERROR_MESSAGE = "Error writing file: {}"
    SAVE_ABORTED_MESSAGE = "Save aborted."
    NOT_FOUND_MESSAGE = "Not found: {}"

    # Prompts
    SAVE_AS_PROMPT = "Save as: "
    SEARCH_PROMPT = "Search (ESC to cancel, Right/Down for next): "

    # Screen layout
    RESERVED_ROWS = 2  # Status bar + message bar
    TAB_DISPLAY = "  "  # Tabs are rendered as two spaces
    FILENAME_DISPLAY_LIMIT = 20
    NO_NAME = "[No Name]"
    EMPTY_ROW_MARKER = "~"
    WELCOME_MESSAGE = "Editr -- version {}"
    GOODBYE_MESSAGE = "Goodbye!"

    # Colors
    NUMBER_COLOR = (220, 163, 163)

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Logging
    LOG_LEVEL_ENV = "EDITR_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FILENAME = "editr.log"
