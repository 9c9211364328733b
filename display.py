"""
UMD Gym Status - Terminal Display

Draws the screen: percent-full label, last-updated label and the refresh
button in its status color, plus the load-failed and mail alerts.
Only call these from the UI thread.
"""

import sys

from config import ALERT_TITLE, MAIL_ERROR_TITLE
from models import ViewState

BUTTON_WIDTH = 20
RESET = "\033[0m"


def color_block(rgb: tuple, text: str = "") -> str:
    """A 24-bit ANSI background block with centered text."""
    red, green, blue = rgb
    return f"\033[48;2;{red};{green};{blue}m{text.center(BUTTON_WIDTH)}{RESET}"


def percent_label(state: ViewState) -> str:
    if state.percent_full is None:
        return "--% full"
    return f"{state.percent_full}% full"


def last_updated_label(state: ViewState) -> str:
    if not state.last_updated_text:
        return "Last updated: never"
    return f"Last updated: {state.last_updated_text}"


class TerminalDisplay:
    def __init__(self, out=None):
        self.out = out or sys.stdout
        self.loading = False

    def message(self, line: str = ""):
        self.out.write(line + "\n")
        self.out.flush()

    def set_loading(self, visible: bool):
        if visible and not self.loading:
            self.message("Loading...")
        self.loading = visible

    def render(self, state: ViewState, interactive: bool = True):
        self.message()
        self.message(percent_label(state))
        self.message(last_updated_label(state))
        self.message(color_block(state.status_color.rgb, "Refresh"))
        if not interactive:
            return
        if state.alert is not None:
            self.show_alert(state)
        else:
            self.message("[Enter] refresh  [q] quit")

    def show_alert(self, state: ViewState):
        self.message()
        if state.mail_error:
            self.message(f"!! {MAIL_ERROR_TITLE}")
            self.message(state.alert)
            self.message("[Enter] OK")
            return
        self.message(f"!! {ALERT_TITLE}")
        self.message(state.alert)
        self.message("[Enter] dismiss  [r] report by email")
