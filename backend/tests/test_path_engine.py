"""
Test end-to-end del core: validate() seguito da resolve().
"""
import pytest

from app.services.flight_path.base import (
    ErrorKind,
    Itinerary,
    PathResolutionError,
    SegmentValidationError,
)
from app.services.path_engine import find_flight_path


class TestFindFlightPath:

    def test_valid_flights(self):
        assert find_flight_path([["AUS", "LAX"], ["LAX", "JFK"]]) == Itinerary("AUS", "JFK")

    def test_path_property(self):
        assert find_flight_path([["AUS", "LAX"], ["LAX", "JFK"]]).path == ["AUS", "JFK"]

    def test_validation_error_propagates(self):
        with pytest.raises(SegmentValidationError) as exc_info:
            find_flight_path([["AUS", "LAX"], ["MIA"], ["JFK", "LGA"]])
        assert exc_info.value.kind == ErrorKind.MALFORMED_SEGMENT

    def test_resolution_error_propagates(self):
        with pytest.raises(PathResolutionError) as exc_info:
            find_flight_path([["SFO", "ATL"], ["ATL", "EWR"], ["EWR", "SFO"]])
        assert exc_info.value.kind == ErrorKind.NO_FLIGHT_PATH
