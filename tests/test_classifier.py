"""Unit tests for the status classifier."""
import json
import logging

import pytest

from classifier import (
    classify,
    compute_percent_full,
    extract_venues,
    find_venue,
    parse_document,
    status_color_for,
)
from errors import NotFoundError, ParseError, ShapeError
from models import DisplayModel, StatusColor


class TestPercentFull:
    """Integer-division percent figure."""

    @pytest.mark.parametrize("count", [0, 1, 40, 79])
    def test_below_capacity_is_zero(self, count):
        assert compute_percent_full(count) == 0

    @pytest.mark.parametrize("count", [80, 81, 500, 10_000])
    def test_at_or_above_capacity_is_one(self, count):
        assert compute_percent_full(count) == 1

    def test_negative_count_is_zero(self):
        assert compute_percent_full(-5) == 0

    def test_never_above_100(self):
        assert all(0 <= compute_percent_full(c) <= 100 for c in range(-10, 1000, 7))


class TestStatusColor:
    """Button color selection."""

    @pytest.mark.parametrize("reason", ["Closed", "N/A"])
    @pytest.mark.parametrize("usage", ["Green", "Orange", "Red", "Purple"])
    def test_closed_at_zero_is_gray_regardless_of_usage(self, reason, usage):
        assert status_color_for(0, reason, usage) is StatusColor.GRAY

    def test_closed_reason_ignored_when_not_zero(self):
        assert status_color_for(1, "Closed", "Red") is StatusColor.RED

    @pytest.mark.parametrize(
        "usage,expected",
        [("Green", StatusColor.GREEN), ("Orange", StatusColor.ORANGE), ("Red", StatusColor.RED)],
    )
    def test_usage_colors(self, usage, expected):
        assert status_color_for(0, "Open", usage) is expected

    def test_unrecognized_usage_is_no_op(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert status_color_for(0, "Open", "Purple") is None
        assert "Color unrecognized: Purple" in caplog.text

    def test_usage_is_case_sensitive(self):
        assert status_color_for(0, "Open", "green") is None

    def test_missing_reason_or_usage_is_no_op(self):
        assert status_color_for(0, None, "Green") is None
        assert status_color_for(0, "Closed", None) is None

    def test_rgb_values(self):
        assert StatusColor.GRAY.rgb == (128, 128, 128)
        assert StatusColor.GREEN.rgb == (0, 255, 0)
        assert StatusColor.ORANGE.rgb == (255, 165, 0)
        assert StatusColor.RED.rgb == (224, 58, 62)


class TestParsing:
    """Document and venue lookup failures."""

    def test_malformed_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_document(b"{not json")

    def test_undecodable_bytes_raise_parse_error(self):
        with pytest.raises(ParseError):
            parse_document(b"\xff\xfe\x00garbage")

    def test_deeply_nested_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            classify(b"[" * 100000)

    def test_top_level_array_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_document(b"[1, 2, 3]")

    def test_missing_data_raises_shape_error(self):
        with pytest.raises(ShapeError):
            extract_venues({"results": []})

    def test_data_not_a_list_raises_shape_error(self):
        with pytest.raises(ShapeError):
            extract_venues({"data": {"title": "ERC Weight Room"}})

    def test_data_with_non_object_raises_shape_error(self):
        with pytest.raises(ShapeError):
            extract_venues({"data": ["ERC Weight Room"]})

    def test_find_venue_first_exact_match(self):
        venues = [
            {"title": "erc weight room", "latest": {"count": 1}},
            {"title": "ERC Weight Room", "latest": {"count": 2, "time": "1:00 PM"}},
            {"title": "ERC Weight Room", "latest": {"count": 3, "time": "2:00 PM"}},
        ]
        venue = find_venue(venues)
        assert venue.latest.count == 2
        assert venue.latest.time == "1:00 PM"

    def test_find_venue_missing_raises_not_found(self):
        with pytest.raises(NotFoundError):
            find_venue([{"title": "Eppley Pool", "latest": {}}])

    def test_find_venue_without_latest_raises_not_found(self):
        with pytest.raises(NotFoundError):
            find_venue([{"title": "ERC Weight Room"}])

    def test_find_venue_latest_not_object_raises_not_found(self):
        with pytest.raises(NotFoundError):
            find_venue([{"title": "ERC Weight Room", "latest": "soon"}])


class TestClassify:
    """Whole pipeline from payload to display model."""

    def test_open_green(self):
        payload = (
            b'{"data":[{"title":"ERC Weight Room","latest":'
            b'{"count":40,"time":"3:00 PM","reason":"Open","usage":"Green"}}]}'
        )
        assert classify(payload) == DisplayModel(
            percent_full=0, last_updated_text="3:00 PM", status_color=StatusColor.GREEN
        )

    def test_closed_overrides_usage(self, feed):
        model = classify(feed(count=0, reason="Closed", usage="Red"))
        assert model.status_color is StatusColor.GRAY

    def test_full_room(self, feed):
        model = classify(feed(count=95, reason="Open", usage="Red"))
        assert model.percent_full == 1
        assert model.status_color is StatusColor.RED

    def test_unrecognized_usage_leaves_color_unset(self, feed):
        model = classify(feed(usage="Blue"))
        assert model.status_color is None
        assert model.last_updated_text == "3:00 PM"

    def test_time_passed_through_verbatim(self, feed):
        model = classify(feed(time="Sep 5, 2016 11:04:59 PM"))
        assert model.last_updated_text == "Sep 5, 2016 11:04:59 PM"

    def test_empty_data_raises_not_found(self):
        with pytest.raises(NotFoundError):
            classify(b'{"data": []}')

    def test_renamed_venue_raises_not_found(self, feed):
        with pytest.raises(NotFoundError):
            classify(feed(title="ERC Weight Room (Main)"))

    def test_malformed_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            classify(b"<html>502 Bad Gateway</html>")

    @pytest.mark.parametrize("count", ["40", None, 4.5, True])
    def test_non_integer_count_raises_shape_error(self, feed, count):
        with pytest.raises(ShapeError):
            classify(feed(count=count))

    def test_missing_time_raises_shape_error(self):
        payload = json.dumps(
            {"data": [{"title": "ERC Weight Room", "latest": {"count": 3, "reason": "Open", "usage": "Green"}}]}
        ).encode()
        with pytest.raises(ShapeError):
            classify(payload)

    def test_other_venue_title(self, feed):
        model = classify(feed(title="Eppley Pool"), title="Eppley Pool")
        assert model.last_updated_text == "2:55 PM"
