import json

import pytest


def venue_feed(count=40, time="3:00 PM", reason="Open", usage="Green", title="ERC Weight Room"):
    """Build an area-usage payload with a single venue."""
    return json.dumps({
        "data": [
            {"title": "Eppley Pool", "latest": {"count": 12, "time": "2:55 PM", "reason": "Open", "usage": "Green"}},
            {
                "title": title,
                "latest": {"count": count, "time": time, "reason": reason, "usage": usage},
            },
        ]
    }).encode()


@pytest.fixture
def feed():
    return venue_feed
