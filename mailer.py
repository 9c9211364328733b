"""
UMD Gym Status - Problem Reports

Opens the platform mail handler with a pre-filled report.
"""

import logging
import webbrowser
from urllib.parse import quote

from config import REPORT_BODY, REPORT_RECIPIENT, REPORT_SUBJECT

logger = logging.getLogger(__name__)


def build_mailto_url(
    recipient: str = REPORT_RECIPIENT,
    subject: str = REPORT_SUBJECT,
    body: str = REPORT_BODY,
) -> str:
    """Build a mailto: URL for the report."""
    url = f"mailto:{quote(recipient, safe='@')}?subject={quote(subject)}"
    if body:
        url += f"&body={quote(body)}"
    return url


def send_report() -> bool:
    """
    Open a pre-filled report in the user's mail client.

    Returns:
        False if no handler could be launched
    """
    url = build_mailto_url()
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.error(f"Mail handler failed: {e}")
        return False

    if not opened:
        logger.warning("No mail handler available")
    return opened
