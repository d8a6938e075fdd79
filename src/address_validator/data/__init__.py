"""Static reference data for address normalization."""

from __future__ import annotations

from address_validator.data.constants import (
    CITY_NAME_EXCEPTIONS,
    STATE_ABBREVS,
    STATE_NAME_TO_ABBREV,
    STREET_TYPE_ABBREVS,
)

__all__ = [
    "CITY_NAME_EXCEPTIONS",
    "STATE_ABBREVS",
    "STATE_NAME_TO_ABBREV",
    "STREET_TYPE_ABBREVS",
]
