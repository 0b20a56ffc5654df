"""Filter and rank options against typed text."""

from __future__ import annotations

from collections.abc import Sequence

from kanban.core.options import Option


def filter_options(options: Sequence[Option], filter_text: str) -> list[Option]:
    """Return the options visible for a filter, best matches first.

    Matching is a case-insensitive substring test on the option name.
    Names starting with the filter rank before names that merely contain it;
    within each group the original order is kept (sorted() is stable).
    A filter matching nothing returns every option, so the user can never
    filter themselves into an empty list.
    """
    needle = filter_text.lower()
    if not needle:
        return list(options)

    matches = [option for option in options if needle in option.name.lower()]
    if not matches:
        return list(options)

    return sorted(matches, key=lambda option: not option.name.lower().startswith(needle))
