"""
UMD Gym Status - Fetcher

Downloads the raw area-usage feed. Call this off the UI thread.
"""

import logging
from contextlib import contextmanager
from typing import Optional

import requests

from config import API_URL, REQUEST_TIMEOUT
from errors import NetworkError

logger = logging.getLogger(__name__)


@contextmanager
def network_activity(indicator=None):
    """Keep the activity indicator visible while the block runs."""
    if indicator is not None:
        indicator.show()
    try:
        yield
    finally:
        if indicator is not None:
            indicator.hide()


def fetch_payload(
    url: str = API_URL,
    indicator=None,
    session: Optional[requests.Session] = None,
) -> bytes:
    """
    Fetch the current area-usage feed.

    Args:
        url: Endpoint to GET
        indicator: Optional object with show()/hide(), toggled around the request
        session: Optional requests session to reuse

    Returns:
        The raw response body

    Raises:
        NetworkError: on connection failure, bad URL or a non-2xx status
    """
    http = session or requests
    with network_activity(indicator):
        try:
            response = http.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch gym data: {e}")
            raise NetworkError(str(e)) from e

    logger.debug(f"Fetched {len(response.content)} bytes from {url}")
    return response.content
