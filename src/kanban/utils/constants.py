"""Constants used throughout kanban."""

# Clear screen and move cursor to the top-left corner
CLEAR_SCREEN = "\u001b[2J\u001b[0;0f"

# Prefix marking an automation command on the input channel
COMMAND_SENTINEL = "►:"

# Question viewport sizing (in terminal rows)
MIN_QUESTION_ROWS = 3
MAX_RESERVED_ROWS = 12
OPTION_CHROME_ROWS = 4

# Option list window
OPTION_WINDOW_ROWS = 8
OPTION_ANCHOR_OFFSET = 4

# Row markers
SELECTED_MARKER = "► "
UNSELECTED_MARKER = "  "

# Hints
SCROLL_HINT = "[Use ▲/▼ to see more]"
FILTER_PLACEHOLDER = " [Start typing to filter...]"

DEFAULT_TASK_PROMPT = "What would you like to do?"
UNMODIFIED_TEMPLATE_PROMPT = (
    "You did not modify the template. Are you sure you want to continue?"
)


# Logical key names
class Key:
    """Logical key names understood by the prompt state machines."""

    RETURN = "return"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    CHAR = "char"


# Automation command names
class Command:
    """Command names accepted after the sentinel."""

    KEYPRESS = "keypress"
    SET_LINE = "set_line"
    SUBMIT = "submit"


# File input menu actions
class FileAction:
    """Values of the file input menu options."""

    OPEN_EDITOR = "openEditor"
    CONTINUE = "continue"
    ABORT = "abort"
