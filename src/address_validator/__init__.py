"""address-validator: US address validation backed by a geocoding provider.

This package provides an address validation pipeline with:
- Pluggable geocoding providers (default: Google Geocoding API)
- Deterministic component normalization
- Match heuristics and fixed-weight confidence scoring
- A tri-state result: valid, corrected or unverifiable
- Pandas integration, a FastAPI service and a Typer CLI

Quick Start:
    >>> from address_validator import AddressValidationService
    >>> service = AddressValidationService()
    >>> result = service.validate("1600 amphitheatre pkwy mountain view ca")
    >>> print(result.status)  # "corrected"
    >>> print(result.standardized.street)  # "Amphitheatre Pkwy"

    # Never raises; check the status instead
    >>> if not result.is_verified:
    ...     print(result.reason)

    # Pandas integration
    >>> import pandas as pd
    >>> df = pd.DataFrame({"address": ["1600 Amphitheatre Pkwy, Mountain View, CA"]})
    >>> result_df = service.validate_dataframe(df, "address")
"""

from __future__ import annotations  # noqa: I001

from address_validator.models import (
    COMPONENT_FIELDS,
    PACKAGE_NAME,
    RESULT_COLUMNS,
    AccuracyTier,
    AddressComponents,
    AddressValidatorError,
    GeocodeOutcome,
    GeocodeStatus,
    LookupResult,
    ValidationResult,
    ValidationStatus,
)
from address_validator.core import (
    calculate_confidence,
    component_match_ratio,
    is_exact_match,
    map_accuracy_tier,
    normalize_city,
    normalize_components,
    normalize_number,
    normalize_state,
    normalize_street,
    normalize_zip_code,
)
from address_validator.config import (
    CONFIDENCE_THRESHOLD,
    ValidatorConfig,
    get_config,
    validate_config,
)
from address_validator.protocols import GeocodeProviderProtocol
from address_validator.providers import (
    BaseGeocodeProvider,
    GoogleGeocodingProvider,
    ProviderFactory,
    safe_lookup,
)
from address_validator.service import (
    AddressValidationService,
    get_default_service,
    validate,
)
from address_validator.pandas_ext import (
    register_accessor,
    validate_address_series,
    validate_addresses,
)

__version__ = "1.0.0"
__package_name__ = "address-validator"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressValidationService",
    "get_default_service",
    "validate",
    # Models
    "AddressComponents",
    "ValidationResult",
    "ValidationStatus",
    "GeocodeOutcome",
    "GeocodeStatus",
    "LookupResult",
    "AccuracyTier",
    "COMPONENT_FIELDS",
    "RESULT_COLUMNS",
    # Errors
    "PACKAGE_NAME",
    "AddressValidatorError",
    # Core functions
    "normalize_street",
    "normalize_city",
    "normalize_state",
    "normalize_zip_code",
    "normalize_number",
    "normalize_components",
    "is_exact_match",
    "component_match_ratio",
    "calculate_confidence",
    "map_accuracy_tier",
    # Configuration
    "CONFIDENCE_THRESHOLD",
    "ValidatorConfig",
    "get_config",
    "validate_config",
    # Providers
    "GeocodeProviderProtocol",
    "BaseGeocodeProvider",
    "GoogleGeocodingProvider",
    "ProviderFactory",
    "safe_lookup",
    # Pandas integration
    "validate_addresses",
    "validate_address_series",
    "register_accessor",
]
