"""
Tests for location search: validation, matching, distance filter, ordering and pagination.
"""
import datetime as dt

import pytest

from tests.conftest import NOW
from fitcheck.core.errors import InvalidArgumentError, MissingCoordinatesError
from fitcheck.services.search import SearchEngine

CENTER = (-23.5505, -46.6333)


@pytest.fixture
def engine(location_store):
    return SearchEngine(location_store)


@pytest.fixture
def catalog(make_location):
    """Três academias em linha, a ~0 m, ~1,1 km e ~5,6 km do centro."""
    return [
        make_location(title="Zeta Fitness", latitude=-23.5505, longitude=-46.6333,
                      description="Gym near Paulista", created_at=NOW - dt.timedelta(days=3)),
        make_location(title="alpha Gym", latitude=-23.5605, longitude=-46.6333,
                      description="Crossfit box", created_at=NOW - dt.timedelta(days=1)),
        make_location(title="Mid Studio", latitude=-23.6005, longitude=-46.6333,
                      description="yoga and GYM classes", created_at=NOW - dt.timedelta(days=2)),
        make_location(title="Pool Center", latitude=-23.5505, longitude=-46.6333,
                      description="Swimming only", created_at=NOW - dt.timedelta(days=4)),
    ]


class TestSearchValidation:
    """Argumentos inválidos viram InvalidArgumentError com mensagem específica."""

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"query": ""}, "Search query is required"),
            ({"query": "   "}, "Search query is required"),
            ({"query": "gym", "page": 0}, "Page must be greater than 0"),
            ({"query": "gym", "per_page": 0}, "Per page must be between 1 and 100"),
            ({"query": "gym", "per_page": 101}, "Per page must be between 1 and 100"),
            ({"query": "gym", "sort_by": "rating"}, "Sort by must be one of: name, distance, createdAt"),
            ({"query": "gym", "sort_order": "up"}, "Sort order must be asc or desc"),
            ({"query": "gym", "user_latitude": 91.0}, "User latitude must be between -90 and 90 degrees"),
            ({"query": "gym", "user_longitude": -181.0}, "User longitude must be between -180 and 180 degrees"),
            ({"query": "gym", "max_distance": 0}, "Maximum distance must be greater than 0"),
            ({"query": "gym", "max_distance": 50001}, "Maximum distance cannot exceed 50,000 meters"),
        ],
    )
    def test_rejects(self, engine, kwargs, message):
        with pytest.raises(InvalidArgumentError) as exc:
            engine.search(**kwargs)
        assert exc.value.message == message

    def test_distance_sort_needs_coordinates(self, engine):
        with pytest.raises(MissingCoordinatesError):
            engine.search("gym", sort_by="distance", user_latitude=CENTER[0])

    def test_missing_coordinates_is_invalid_argument(self):
        assert issubclass(MissingCoordinatesError, InvalidArgumentError)


class TestSearchMatching:
    def test_case_insensitive_title_or_description(self, engine, catalog):
        result = engine.search("GYM")

        titles = [item.title for item in result.items]
        assert titles == ["alpha Gym", "Mid Studio", "Zeta Fitness"]
        assert result.total_count == 3
        assert result.search_query == "GYM"

    def test_no_match_is_empty_page(self, engine, catalog):
        result = engine.search("tennis")

        assert result.items == []
        assert result.total_count == 0
        assert result.total_pages == 0
        assert result.has_next_page is False
        assert result.has_previous_page is False

    @pytest.mark.parametrize("query", ["SÃO", "são", "ACADEMIA SÃO"])
    def test_non_ascii_case_insensitive(self, engine, make_location, query):
        make_location(title="Academia São Paulo")

        result = engine.search(query)

        assert result.total_count == 1
        assert result.items[0].title == "Academia São Paulo"

    def test_non_ascii_in_description(self, engine, make_location):
        make_location(title="Box 1", description="Perto da estação SÉ")
        assert engine.search("estação sé").total_count == 1

    @pytest.mark.parametrize("query", ["%", "_", "\\"])
    def test_like_wildcards_are_literal(self, engine, catalog, query):
        assert engine.search(query).total_count == 0

    def test_literal_percent_matches(self, engine, make_location):
        make_location(title="100% Fit")
        make_location(title="1000 Fit")

        result = engine.search("0%")

        assert [item.title for item in result.items] == ["100% Fit"]

    def test_no_distance_without_coordinates(self, engine, catalog):
        result = engine.search("gym")
        assert all(item.distance is None for item in result.items)

    def test_max_distance_ignored_without_coordinates(self, engine, catalog):
        assert engine.search("gym", max_distance=10).total_count == 3


class TestSearchDistance:
    def test_radius_filter(self, engine, catalog):
        result = engine.search("gym", user_latitude=CENTER[0], user_longitude=CENTER[1], max_distance=2000)

        assert sorted(item.title for item in result.items) == ["Zeta Fitness", "alpha Gym"]
        assert result.total_count == 2

    def test_distance_rounded_to_two_decimals(self, engine, catalog):
        result = engine.search("alpha", user_latitude=CENTER[0], user_longitude=CENTER[1])

        (hit,) = result.items
        assert hit.distance == round(hit.distance, 2)
        assert 1100 < hit.distance < 1120

    @pytest.mark.parametrize(
        "order,expected",
        [
            ("asc", ["Zeta Fitness", "alpha Gym", "Mid Studio"]),
            ("desc", ["Mid Studio", "alpha Gym", "Zeta Fitness"]),
        ],
    )
    def test_sort_by_distance(self, engine, catalog, order, expected):
        result = engine.search(
            "gym", sort_by="distance", sort_order=order, user_latitude=CENTER[0], user_longitude=CENTER[1]
        )
        assert [item.title for item in result.items] == expected


class TestSearchOrdering:
    def test_name_desc(self, engine, catalog):
        result = engine.search("gym", sort_order="desc")
        assert [item.title for item in result.items] == ["Zeta Fitness", "Mid Studio", "alpha Gym"]

    @pytest.mark.parametrize(
        "order,expected",
        [
            ("asc", ["Zeta Fitness", "Mid Studio", "alpha Gym"]),
            ("desc", ["alpha Gym", "Mid Studio", "Zeta Fitness"]),
        ],
    )
    def test_created_at(self, engine, catalog, order, expected):
        result = engine.search("gym", sort_by="createdAt", sort_order=order)
        assert [item.title for item in result.items] == expected

    def test_name_ties_keep_store_order(self, engine, make_location):
        make_location(title="Same Gym", description="first")
        make_location(title="same gym", description="second")

        asc = engine.search("same gym")
        desc = engine.search("same gym", sort_order="desc")

        assert [item.description for item in asc.items] == ["first", "second"]
        assert [item.description for item in desc.items] == ["first", "second"]


class TestSearchPagination:
    @pytest.fixture
    def many(self, make_location):
        return [make_location(title=f"Gym {i:02d}") for i in range(45)]

    def test_pages_cover_all_results(self, engine, many):
        seen = []
        page = 1
        while True:
            result = engine.search("gym", page=page, per_page=20)
            seen.extend(item.id for item in result.items)
            assert result.has_next_page == (page < result.total_pages)
            assert result.has_previous_page == (page > 1)
            if not result.has_next_page:
                break
            page += 1

        assert result.total_pages == 3
        assert len(seen) == len(set(seen)) == 45

    def test_page_past_end_is_empty(self, engine, many):
        result = engine.search("gym", page=4, per_page=20)

        assert result.items == []
        assert result.total_count == 45
        assert result.has_next_page is False
        assert result.has_previous_page is True

    def test_last_page_is_partial(self, engine, many):
        result = engine.search("gym", page=3, per_page=20)

        assert len(result.items) == 5
        assert result.current_page == 3
        assert result.per_page == 20
