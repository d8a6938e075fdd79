"""Address validation models package.

Re-exports the component model, result types, enums and errors.
"""

from __future__ import annotations

from address_validator.models.components import AddressComponents
from address_validator.models.enums import (
    COMPONENT_FIELDS,
    RESULT_COLUMNS,
    AccuracyTier,
    GeocodeStatus,
    ValidationStatus,
)
from address_validator.models.errors import PACKAGE_NAME, AddressValidatorError
from address_validator.models.results import GeocodeOutcome, LookupResult, ValidationResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressValidatorError",
    # Enums and constants
    "AccuracyTier",
    "GeocodeStatus",
    "ValidationStatus",
    "COMPONENT_FIELDS",
    "RESULT_COLUMNS",
    # Models
    "AddressComponents",
    # Results
    "GeocodeOutcome",
    "LookupResult",
    "ValidationResult",
]
