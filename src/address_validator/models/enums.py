"""Status enumerations and field constants."""

from __future__ import annotations

from enum import Enum


class ValidationStatus(str, Enum):
    """Tri-state outcome of a validation call."""

    VALID = "valid"
    CORRECTED = "corrected"
    UNVERIFIABLE = "unverifiable"


class GeocodeStatus(str, Enum):
    """Status of a provider lookup that did not fail."""

    OK = "ok"
    ZERO_RESULTS = "zero_results"


class AccuracyTier(str, Enum):
    """Coarse precision classification reported by the geocoder."""

    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"


# Serialized component names, in output order
COMPONENT_FIELDS: tuple[str, ...] = ("number", "street", "city", "state", "zipCode")

# Flat column layout used for batch / DataFrame output
RESULT_COLUMNS: tuple[str, ...] = (
    "status",
    "original",
    "confidence",
    "provider",
    "reason",
    *COMPONENT_FIELDS,
)
