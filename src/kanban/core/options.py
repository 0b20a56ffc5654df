"""Option records and normalization of caller-supplied option shapes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Option:
    """A selectable option: display label plus opaque result value."""

    name: str
    value: Any


OptionLike = Union[str, Option, Mapping, tuple]


def to_option(raw: OptionLike) -> Option:
    """Convert one caller-supplied option to an Option.

    Accepted shapes:
    - "label"                      -> Option("label", "label")
    - Option(...)                  -> unchanged
    - {"name": ..., "value": ...}  -> value defaults to name; extra keys ignored
    - ("label", value)

    Raises:
        TypeError: For any other shape.
    """
    if isinstance(raw, Option):
        return raw
    if isinstance(raw, str):
        return Option(name=raw, value=raw)
    if isinstance(raw, Mapping):
        if "name" not in raw:
            raise TypeError(f"Option mapping has no 'name': {raw!r}")
        name = str(raw["name"])
        return Option(name=name, value=raw.get("value", name))
    if isinstance(raw, tuple) and len(raw) == 2:
        return Option(name=str(raw[0]), value=raw[1])
    raise TypeError(f"Unsupported option: {raw!r}")


def normalize_options(options: Iterable[OptionLike] | None) -> list[Option]:
    """Drop falsy entries and convert the rest, keeping supplied order."""
    if not options:
        return []
    return [to_option(raw) for raw in options if raw]
