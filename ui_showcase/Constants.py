# Constants.py
# Description: Shared constants for the showcase UI
#
#######################################################################################################################

# --- Application ---
APP_TITLE = "UI Showcase"
DEFAULT_THEME = "textual-dark"

# --- Navigation ---
# Appended to the current detail label by the "Open Next" button.
DETAIL_SUFFIX = "-next"

# --- View text ---
LIST_HEADING = "Button Demo"
STATS_PLACEHOLDER = "Stats View"
INPUT_PLACEHOLDER = "Type..."
