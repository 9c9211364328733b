"""
UMD Gym Status - Status Classifier

Turns the raw feed into what the screen shows: a percent-full figure,
the server's "last updated" text and a button color.
"""

import json
import logging
from typing import Optional

from config import CAPACITY, CLOSED_REASONS, USAGE_COLORS, VENUE_TITLE
from errors import NotFoundError, ParseError, ShapeError
from models import DisplayModel, LatestReading, StatusColor, VenueRecord

logger = logging.getLogger(__name__)


def parse_document(payload: bytes) -> dict:
    """Decode the payload as a JSON object."""
    try:
        document = json.loads(payload)
    except (ValueError, TypeError, RecursionError) as e:
        raise ParseError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise ParseError(f"Expected a JSON object, got {type(document).__name__}")
    return document


def extract_venues(document: dict) -> list:
    """Return the list of venue records under "data"."""
    venues = document.get("data")
    if not isinstance(venues, list):
        raise ShapeError('Document has no "data" array')
    if not all(isinstance(venue, dict) for venue in venues):
        raise ShapeError('"data" contains a non-object entry')
    return venues


def find_venue(venues: list, title: str = VENUE_TITLE) -> VenueRecord:
    """
    Find the first venue whose title matches exactly.

    Raises:
        NotFoundError: if no venue matches, or the match has no "latest" object
    """
    match = next((venue for venue in venues if venue.get("title") == title), None)
    if match is None:
        raise NotFoundError(f"{title} not available")

    latest = match.get("latest")
    if not isinstance(latest, dict):
        raise NotFoundError(f'{title} has no "latest" record')

    return VenueRecord(
        title=title,
        latest=LatestReading(
            count=latest.get("count"),
            time=latest.get("time"),
            reason=latest.get("reason"),
            usage=latest.get("usage"),
        ),
    )


def compute_percent_full(count: int) -> int:
    """Fullness figure for a head count, clamped to 0..100."""
    # Integer division: 0 below CAPACITY, 1 at or above it.
    # TODO: confirm with product whether this should be count * 100 // CAPACITY.
    percent = max(0, min(count, CAPACITY)) // CAPACITY
    return min(percent, 100)


def status_color_for(percent_full: int, reason, usage) -> Optional[StatusColor]:
    """
    Pick the button color.

    Returns None when the color should stay as it is: an unrecognized usage
    value, or a reason/usage the server didn't send as a string.
    """
    if not isinstance(reason, str) or not isinstance(usage, str):
        return None

    if percent_full == 0 and reason in CLOSED_REASONS:
        return StatusColor.GRAY

    color_name = USAGE_COLORS.get(usage)
    if color_name is None:
        logger.warning(f"Color unrecognized: {usage}")
        return None
    return StatusColor[color_name.upper()]


def classify(payload: bytes, title: str = VENUE_TITLE) -> DisplayModel:
    """
    Run the whole pipeline on a fetched payload.

    Raises:
        ParseError, ShapeError, NotFoundError
    """
    venue = find_venue(extract_venues(parse_document(payload)), title)
    latest = venue.latest

    if not isinstance(latest.count, int) or isinstance(latest.count, bool):
        raise ShapeError(f'"count" is not an integer: {latest.count!r}')
    if latest.time is None:
        raise ShapeError('"time" is missing')

    percent_full = compute_percent_full(latest.count)
    model = DisplayModel(
        percent_full=percent_full,
        last_updated_text=str(latest.time),
        status_color=status_color_for(percent_full, latest.reason, latest.usage),
    )
    logger.info(f"{venue.title}: count={latest.count} -> {percent_full}% full ({latest.time})")
    return model
