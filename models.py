"""
UMD Gym Status - Data Models
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from config import COLORS, MAIL_ERROR_MESSAGE


class StatusColor(Enum):
    """Refresh button color, valued by its RGB triple."""

    GRAY = COLORS["gray"]
    GREEN = COLORS["green"]
    ORANGE = COLORS["orange"]
    RED = COLORS["red"]

    @property
    def rgb(self) -> tuple:
        return self.value


@dataclass(frozen=True)
class LatestReading:
    """The "latest" block of a venue record, as sent by the server."""

    count: Any
    time: Any
    reason: Any = None
    usage: Any = None


@dataclass(frozen=True)
class VenueRecord:
    title: str
    latest: LatestReading


@dataclass(frozen=True)
class DisplayModel:
    """
    What one successful refresh produces.

    A status_color of None means the server sent a usage value we don't
    recognize, and the button keeps whatever color it had.
    """

    percent_full: int
    last_updated_text: str
    status_color: Optional[StatusColor]


@dataclass(frozen=True)
class ViewState:
    """Everything the display needs to draw the screen."""

    percent_full: Optional[int] = None
    last_updated_text: str = ""
    status_color: StatusColor = StatusColor.RED
    alert: Optional[str] = None
    mail_error: bool = False

    def apply(self, model: DisplayModel) -> "ViewState":
        color = model.status_color if model.status_color is not None else self.status_color
        return replace(
            self,
            percent_full=model.percent_full,
            last_updated_text=model.last_updated_text,
            status_color=color,
        )

    def with_alert(self, message: Optional[str]) -> "ViewState":
        return replace(self, alert=message, mail_error=False)

    def with_mail_error(self) -> "ViewState":
        return replace(self, alert=MAIL_ERROR_MESSAGE, mail_error=True)
