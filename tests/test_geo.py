"""
Tests for the haversine distance helper.
"""
import pytest

from fitcheck.services.geo import distance_meters


class TestDistanceMeters:
    """Great-circle distance between two coordinates."""

    def test_identical_points_are_zero(self):
        """Same coordinates give exactly zero."""
        assert distance_meters(-23.5505, -46.6333, -23.5505, -46.6333) == 0

    @pytest.mark.parametrize(
        "a,b",
        [
            ((-23.5505, -46.6333), (-23.5495, -46.6323)),
            ((0.0, 0.0), (10.0, 10.0)),
            ((51.5074, -0.1278), (40.7128, -74.0060)),
            ((89.9, 179.9), (-89.9, -179.9)),
        ],
    )
    def test_symmetry(self, a, b):
        """Swapping the points does not change the distance."""
        assert distance_meters(*a, *b) == distance_meters(*b, *a)

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is about 111.19 km with R = 6371 km."""
        assert distance_meters(0, 0, 1, 0) == pytest.approx(111194.93, rel=1e-6)

    def test_small_offset_is_about_140_meters(self):
        """+0.001 degree on both axes near São Paulo lands beyond the 100 m geofence."""
        d = distance_meters(-23.5505, -46.6333, -23.5495, -46.6323)
        assert 140 < d < 160
