"""Heuristics comparing the user's input with the provider's answer."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from address_validator.models.components import AddressComponents
from address_validator.models.enums import COMPONENT_FIELDS

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _squash(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text.lower())


def is_exact_match(original: str | None, formatted: str | None) -> bool:
    """Check whether the formatted address is a near-duplicate of the input.

    Both strings are lower-cased and stripped of everything except ASCII
    letters and digits; the match holds when either contains the other.
    This is intentionally loose: punctuation, spacing and a trailing
    country or ZIP on either side do not break the match.

    Args:
        original: Address as entered by the user.
        formatted: Formatted address returned by the provider.

    Returns:
        True if one squashed string contains the other.
    """
    if not original or not formatted:
        return False

    squashed_original = _squash(original)
    squashed_formatted = _squash(formatted)
    return squashed_original in squashed_formatted or squashed_formatted in squashed_original


def _component_values(standardized: AddressComponents | Mapping[str, Any]) -> list[str]:
    if isinstance(standardized, AddressComponents):
        return list(standardized.values())
    values = []
    for name in COMPONENT_FIELDS:
        value = standardized.get(name)
        if value is None and name == "zipCode":
            value = standardized.get("zip_code")
        values.append("" if value is None else str(value))
    return values


def component_match_ratio(
    original: str | None,
    standardized: AddressComponents | Mapping[str, Any],
) -> float:
    """Fraction of non-empty components that literally appear in the input.

    Args:
        original: Address as entered by the user.
        standardized: Normalized components (model or mapping keyed by
            number/street/city/state/zipCode).

    Returns:
        Ratio in [0, 1]; 0 when no component is non-empty.
    """
    haystack = (original or "").lower()
    present = [value for value in _component_values(standardized) if value]
    if not present:
        return 0.0

    hits = sum(1 for value in present if value.lower() in haystack)
    return hits / len(present)
