"""Tests for theme and search filtering."""

import pytest

from brickfolio.catalog.filters import filter_sets, matches_search


class TestMatchesSearch:
    """Tests for the search predicate."""

    @pytest.mark.parametrize("search", ["", "   ", None])
    def test_blank_matches_everything(self, make_set, search) -> None:
        """Blank search does not filter."""
        assert matches_search(make_set("1"), search)

    def test_case_insensitive_substring(self, make_set) -> None:
        """Search is a case-insensitive substring match."""
        lego_set = make_set("1", name="Millennium Falcon", number="75192")
        assert matches_search(lego_set, "FALCON")
        assert matches_search(lego_set, "nium fal")

    def test_matches_number(self, make_set) -> None:
        """Set number is searched too."""
        assert matches_search(make_set("1", name="Falcon", number="75192"), "7519")

    def test_spans_name_and_number(self, make_set) -> None:
        """Name and number are joined by a single space."""
        lego_set = make_set("1", name="Falcon", number="75192")
        assert matches_search(lego_set, "falcon 751")
        assert not matches_search(lego_set, "falcon75192")

    def test_no_fuzzy_matching(self, make_set) -> None:
        """Out-of-order tokens do not match."""
        assert not matches_search(make_set("1", name="Millennium Falcon"), "falcon millennium")


class TestFilterSets:
    """Tests for filter_sets."""

    def test_no_filters_returns_everything(self, space_and_castle) -> None:
        """No theme and blank search keep every set."""
        assert filter_sets(space_and_castle, None, "") == space_and_castle

    @pytest.mark.parametrize("theme", ["Space", "Castle"])
    def test_theme_filter_is_exact_subset(self, space_and_castle, theme) -> None:
        """Theme filter keeps exactly the sets of that theme."""
        result = filter_sets(space_and_castle, theme, "")
        assert result == [s for s in space_and_castle if s.theme == theme]

    def test_theme_filter_is_case_sensitive(self, space_and_castle) -> None:
        """Theme match is exact."""
        assert filter_sets(space_and_castle, "space", "") == []

    def test_theme_and_search_combined(self, space_and_castle) -> None:
        """Both predicates must hold."""
        result = filter_sets(space_and_castle, "Space", "moon")
        assert [s.id for s in result] == ["b"]
        assert filter_sets(space_and_castle, "Castle", "moon") == []

    def test_all_themes_is_superset(self, space_and_castle) -> None:
        """Dropping the theme filter never loses matches."""
        everything = filter_sets(space_and_castle, None, "e")
        for theme in ("Space", "Castle"):
            assert all(s in everything for s in filter_sets(space_and_castle, theme, "e"))

    def test_input_not_modified(self, space_and_castle) -> None:
        """A new list is returned."""
        original = list(space_and_castle)
        result = filter_sets(space_and_castle, "Castle", "")
        assert space_and_castle == original
        assert result is not space_and_castle

    def test_empty_result_is_valid(self, space_and_castle) -> None:
        """Filtering down to nothing is fine."""
        assert filter_sets(space_and_castle, None, "zzz") == []
