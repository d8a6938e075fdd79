"""Address component normalization.

Pure, total functions mapping raw address fragments to canonical forms.
None of them raise: missing input yields an empty string.

Example:
    >>> normalize_street("amphitheatre parkway")
    'Amphitheatre Pkwy'
    >>> normalize_state("California")
    'CA'
    >>> normalize_zip_code("94043-1351")
    '94043'
"""

from __future__ import annotations

import re
from typing import Any

from address_validator.data.constants import (
    CITY_NAME_EXCEPTIONS,
    STATE_NAME_TO_ABBREV,
    STREET_TYPE_ABBREVS,
)
from address_validator.models.components import AddressComponents

_TWO_LETTER_RE = re.compile(r"[a-z]{2}")
_NON_DIGIT_RE = re.compile(r"[^0-9]")

ZIP5_LENGTH = 5


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def normalize_street(street: Any) -> str:
    """Capitalize each word and abbreviate a trailing street type.

    Only the final token is eligible for abbreviation, so
    "court street" becomes "Court St" rather than "Ct St".

    Args:
        street: Raw street name (e.g. "AMPHITHEATRE PARKWAY").

    Returns:
        Normalized street name, or "" when missing.
    """
    words = _as_text(street).lower().split()
    if not words:
        return ""

    *head, last = words
    normalized = [_capitalize(word) for word in head]
    normalized.append(STREET_TYPE_ABBREVS.get(last) or _capitalize(last))
    return " ".join(normalized)


def normalize_city(city: Any) -> str:
    """Title-case a city name, honoring the fixed exception table first.

    Args:
        city: Raw city name.

    Returns:
        Normalized city name, or "" when missing.
    """
    text = _as_text(city)
    lower = text.lower().strip()
    if not lower:
        return ""

    exception = CITY_NAME_EXCEPTIONS.get(lower)
    if exception is not None:
        return exception

    return " ".join(_capitalize(word) for word in lower.split())


def normalize_state(state: Any) -> str:
    """Normalize a state to its two-letter abbreviation.

    Two-letter alphabetic input is upper-cased as-is. Full names
    (50 states + DC) map to their abbreviation. Anything else is
    upper-cased and passed through.

    Args:
        state: State name or abbreviation.

    Returns:
        Two-letter abbreviation, the upper-cased input, or "" when missing.
    """
    text = _as_text(state)
    if not text:
        return ""

    lower = text.strip().lower()
    if _TWO_LETTER_RE.fullmatch(lower):
        return lower.upper()

    return STATE_NAME_TO_ABBREV.get(lower) or text.upper()


def normalize_zip_code(zip_code: Any) -> str:
    """Keep at most the first five digits of a ZIP code.

    ZIP+4 extensions and any non-digit characters are dropped:
    "94043-1351" -> "94043".
    """
    digits = _NON_DIGIT_RE.sub("", _as_text(zip_code))
    return digits[:ZIP5_LENGTH]


def normalize_number(number: Any) -> str:
    """Trim whitespace from a street number."""
    return _as_text(number).strip()


def normalize_components(raw: AddressComponents) -> AddressComponents:
    """Apply the field-wise normalizers to raw provider components.

    Args:
        raw: Unnormalized components extracted from a provider result.

    Returns:
        New AddressComponents with every field in canonical form.
    """
    return AddressComponents(
        number=normalize_number(raw.number),
        street=normalize_street(raw.street),
        city=normalize_city(raw.city),
        state=normalize_state(raw.state),
        zip_code=normalize_zip_code(raw.zip_code),
    )
