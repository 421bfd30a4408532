from __future__ import annotations

from types import SimpleNamespace

import pytest

from recipefinder.domain import FilterState, Recipe
from recipefinder.filters import (
    active_filters,
    clear_filter,
    filter_admin_recipes,
    filter_recipes,
    has_active_filters,
    reset_filters,
    summarize_results,
)


def _names(recipes: list[Recipe]) -> list[str]:
    return [recipe.name for recipe in recipes]


def test_default_state_keeps_everything(sample_recipes: list[Recipe]) -> None:
    assert filter_recipes(sample_recipes, FilterState()) == sample_recipes
    for recipe in sample_recipes:
        assert filter_recipes([recipe], FilterState()) == [recipe]


def test_empty_collection() -> None:
    state = FilterState(search_query="x", selected_cuisine="Thai", difficulty="Hard")
    assert filter_recipes([], state) == []
    assert filter_recipes([], FilterState()) == []


def test_search_matches_ingredient_substring(sample_recipes: list[Recipe]) -> None:
    state = FilterState(search_query="tomato")
    assert _names(filter_recipes(sample_recipes, state)) == ["Pasta"]


def test_search_is_case_insensitive_over_name_and_cuisine(sample_recipes: list[Recipe]) -> None:
    assert _names(filter_recipes(sample_recipes, FilterState(search_query="RAM"))) == ["Ramen"]
    assert _names(filter_recipes(sample_recipes, FilterState(search_query="ital"))) == ["Pasta", "Meatball Sub"]
    assert _names(filter_recipes(sample_recipes, FilterState(search_query="ROLL"))) == ["Meatball Sub"]


def test_search_is_substring_not_token(sample_recipes: list[Recipe]) -> None:
    assert _names(filter_recipes(sample_recipes, FilterState(search_query="kpea cu"))) == ["Chickpea Curry"]
    assert filter_recipes(sample_recipes, FilterState(search_query="curry chickpea")) == []


def test_cuisine_is_exact_match(sample_recipes: list[Recipe]) -> None:
    state = FilterState(selected_cuisine="Italian")
    assert _names(filter_recipes(sample_recipes, state)) == ["Pasta"]
    assert filter_recipes(sample_recipes, FilterState(selected_cuisine="italian")) == []


def test_device_tier_includes_both(sample_recipes: list[Recipe]) -> None:
    mome = filter_recipes(sample_recipes, FilterState(selected_device="MoMe"))
    assert _names(mome) == ["Pasta", "Chickpea Curry", "Meatball Sub"]
    simmr = filter_recipes(sample_recipes, FilterState(selected_device="Simmr"))
    assert _names(simmr) == ["Pasta", "Ramen"]


def test_device_both_is_strict(sample_recipes: list[Recipe]) -> None:
    # "Both" only keeps recipes tagged "Both", not single-device ones.
    assert _names(filter_recipes(sample_recipes, FilterState(selected_device="Both"))) == ["Pasta"]

    mome_only = [r for r in sample_recipes if r.device_support == "MoMe"][:1]
    assert filter_recipes(mome_only, FilterState(selected_device="Both")) == []

    both = [r for r in sample_recipes if r.device_support == "Both"]
    assert filter_recipes(both, FilterState(selected_device="MoMe")) == both


def test_cooking_time_bounds_are_inclusive(sample_recipes: list[Recipe]) -> None:
    state = FilterState(cooking_time_range=(30, 45))
    assert _names(filter_recipes(sample_recipes, state)) == ["Pasta", "Chickpea Curry"]
    assert _names(filter_recipes(sample_recipes, FilterState(cooking_time_range=(0, 0)))) == ["Meatball Sub"]
    assert _names(filter_recipes(sample_recipes, FilterState(cooking_time_range=(120, 120)))) == ["Ramen"]


def test_difficulty_exact(sample_recipes: list[Recipe]) -> None:
    assert _names(filter_recipes(sample_recipes, FilterState(difficulty="Easy"))) == ["Pasta", "Meatball Sub"]
    assert filter_recipes(sample_recipes, FilterState(difficulty="easy")) == []


def test_predicates_are_conjunctive(sample_recipes: list[Recipe]) -> None:
    state = FilterState(search_query="a", selected_device="MoMe", difficulty="Easy", cooking_time_range=(10, 120))
    assert _names(filter_recipes(sample_recipes, state)) == ["Pasta"]


def test_refiltering_matches_combined_state(sample_recipes: list[Recipe]) -> None:
    loose = FilterState(selected_device="MoMe")
    strict = FilterState(selected_device="MoMe", difficulty="Easy")
    once = filter_recipes(sample_recipes, strict)
    twice = filter_recipes(filter_recipes(sample_recipes, loose), strict)
    assert once == twice
    assert filter_recipes(once, strict) == once


def test_order_is_preserved(sample_recipes: list[Recipe]) -> None:
    reversed_recipes = list(reversed(sample_recipes))
    assert filter_recipes(reversed_recipes, FilterState()) == reversed_recipes


def test_malformed_records_do_not_match() -> None:
    broken = SimpleNamespace(
        name=None,
        cuisine=None,
        ingredients=None,
        cooking_time=None,
        difficulty=None,
        device_support=None,
    )
    assert filter_recipes([broken], FilterState(search_query="x", cooking_time_range=(0, 120))) == []
    assert filter_recipes([broken], FilterState(selected_cuisine="Thai")) == []

    no_cuisine = Recipe("9", "Toast", "", ("bread",), 5, "Easy", "MoMe")
    assert filter_recipes([no_cuisine], FilterState(selected_cuisine="Italian")) == []
    assert filter_recipes([no_cuisine], FilterState(search_query="toast")) == [no_cuisine]


def test_reset_filters_returns_defaults(sample_recipes: list[Recipe]) -> None:
    state = reset_filters()
    assert state == FilterState()
    assert state.search_query == ""
    assert state.selected_cuisine is None
    assert state.selected_device is None
    assert state.difficulty is None
    assert state.cooking_time_range == (0, 120)
    assert filter_recipes(sample_recipes, state) == filter_recipes(sample_recipes, FilterState())


def test_active_filters_empty_for_defaults() -> None:
    assert active_filters(FilterState()) == []
    assert has_active_filters(FilterState()) is False


def test_active_filters_order_and_labels() -> None:
    state = FilterState(
        search_query="tomato",
        selected_cuisine="Italian",
        selected_device="Both",
        cooking_time_range=(10, 60),
        difficulty="Easy",
    )
    badges = active_filters(state)
    assert [badge.key for badge in badges] == ["cuisine", "device", "difficulty", "cooking_time", "search"]
    assert [badge.label for badge in badges] == ["Italian", "Both", "Easy", "10-60 min", "Search: tomato"]
    assert has_active_filters(state) is True


def test_empty_selectors_are_unset(sample_recipes: list[Recipe]) -> None:
    state = FilterState(selected_cuisine="", selected_device="", difficulty="")
    assert filter_recipes(sample_recipes, state) == sample_recipes
    assert active_filters(state) == []
    assert has_active_filters(state) is False


def test_time_badge_shown_for_either_bound() -> None:
    assert [b.label for b in active_filters(FilterState(cooking_time_range=(5, 120)))] == ["5-120 min"]
    assert [b.label for b in active_filters(FilterState(cooking_time_range=(0, 90)))] == ["0-90 min"]


def test_badge_clear_resets_only_its_field() -> None:
    state = FilterState(
        search_query="tomato",
        selected_cuisine="Italian",
        selected_device="MoMe",
        cooking_time_range=(10, 60),
        difficulty="Hard",
    )
    cleared = {badge.key: badge.clear() for badge in active_filters(state)}
    assert cleared["cuisine"] == FilterState(
        search_query="tomato", selected_device="MoMe", cooking_time_range=(10, 60), difficulty="Hard"
    )
    assert cleared["device"].selected_device is None
    assert cleared["device"].selected_cuisine == "Italian"
    assert cleared["difficulty"].difficulty is None
    assert cleared["cooking_time"].cooking_time_range == (0, 120)
    assert cleared["cooking_time"].search_query == "tomato"
    assert cleared["search"].search_query == ""
    assert cleared["search"].difficulty == "Hard"


def test_clear_filter_unknown_key() -> None:
    with pytest.raises(KeyError):
        clear_filter(FilterState(), "colour")


def test_admin_tabs(sample_recipes: list[Recipe]) -> None:
    assert filter_admin_recipes(sample_recipes, "all", "") == sample_recipes
    assert _names(filter_admin_recipes(sample_recipes, "pending", "")) == ["Ramen"]
    assert _names(filter_admin_recipes(sample_recipes, "approved", "")) == ["Pasta", "Chickpea Curry", "Meatball Sub"]


def test_admin_search_is_name_only(sample_recipes: list[Recipe]) -> None:
    assert _names(filter_admin_recipes(sample_recipes, "all", "CURRY")) == ["Chickpea Curry"]
    assert filter_admin_recipes(sample_recipes, "all", "tomato") == []
    assert filter_admin_recipes(sample_recipes, "pending", "pasta") == []


def test_admin_unknown_tab(sample_recipes: list[Recipe]) -> None:
    with pytest.raises(ValueError):
        filter_admin_recipes(sample_recipes, "archived", "")


def test_summarize_results() -> None:
    assert summarize_results(2, 12) == "Showing 2 of 12 recipes"
