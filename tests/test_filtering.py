"""Tests for option filtering and ranking."""

from kanban.core.filtering import filter_options
from kanban.core.options import Option, normalize_options


FRUIT = [
    Option("Apple", 1),
    Option("Banana", 2),
    Option("Grape", 3),
]


def names(options):
    return [o.name for o in options]


def test_empty_filter_returns_all_in_order():
    assert filter_options(FRUIT, "") == FRUIT


def test_starts_with_ranks_before_contains():
    """Apple starts with "ap", Grape only contains it, Banana is excluded."""
    assert names(filter_options(FRUIT, "ap")) == ["Apple", "Grape"]


def test_matching_is_case_insensitive():
    assert names(filter_options(FRUIT, "AP")) == ["Apple", "Grape"]
    assert names(filter_options(FRUIT, "bAn")) == ["Banana"]


def test_start_match_wins_regardless_of_original_order():
    options = normalize_options(["Unpatch", "Other", "Patch release", "Repatch"])

    assert names(filter_options(options, "patch")) == [
        "Patch release",
        "Unpatch",
        "Repatch",
    ]


def test_ties_keep_original_order():
    """Within each group the supplied order is kept, not alphabetical order."""
    options = normalize_options(["fix zeta", "fix alpha", "a fix", "the fix"])

    assert names(filter_options(options, "fix")) == [
        "fix zeta",
        "fix alpha",
        "a fix",
        "the fix",
    ]


def test_no_match_falls_back_to_full_list():
    """Filtering with text nobody contains returns the original list."""
    for text in ("xyz", "apple pie", "  "):
        assert filter_options(FRUIT, text) == FRUIT


def test_filter_is_idempotent():
    first = filter_options(FRUIT, "a")
    second = filter_options(FRUIT, "a")

    assert first == second
    assert names(first) == ["Apple", "Banana", "Grape"]


def test_filter_does_not_mutate_input():
    options = list(FRUIT)
    filter_options(options, "gr")
    assert options == FRUIT
