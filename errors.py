"""
UMD Gym Status - Errors

Every failure of a refresh cycle is a GymStatusError. None of them are
retried; the cycle ends and the user sees an alert.
"""

from config import GENERIC_ERROR_MESSAGE, NETWORK_ERROR_MESSAGE, NOT_FOUND_MESSAGE


class GymStatusError(Exception):
    """Base class for refresh failures."""

    alert_message = GENERIC_ERROR_MESSAGE


class NetworkError(GymStatusError):
    """The request failed, the URL was malformed or the server answered non-2xx."""

    alert_message = NETWORK_ERROR_MESSAGE


class ParseError(GymStatusError):
    """The payload is not a JSON object."""


class ShapeError(GymStatusError):
    """The JSON document does not have the expected layout."""


class NotFoundError(GymStatusError):
    """The venue is missing from the data, or has no "latest" record."""

    alert_message = NOT_FOUND_MESSAGE
