from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from address_validator.config import CONFIDENCE_THRESHOLD, get_config
from address_validator.core.matching import component_match_ratio, is_exact_match
from address_validator.core.normalizer import normalize_components
from address_validator.core.scoring import (
    calculate_confidence,
    map_accuracy_tier,
    round_confidence,
)
from address_validator.models import (
    AddressComponents,
    GeocodeOutcome,
    ValidationResult,
    ValidationStatus,
)
from address_validator.providers import ProviderFactory, is_non_empty_string, safe_lookup

if TYPE_CHECKING:
    import pandas as pd

    from address_validator.protocols import GeocodeProviderProtocol

logger = logging.getLogger(__name__)

REASON_ADDRESS_REQUIRED = "Address is required"
REASON_NO_RESULTS = "No results found"
REASON_MULTIPLE_MATCHES = "Multiple matches found"
REASON_ERROR_PREFIX = "Validation error: "


def _provider_name(provider: GeocodeProviderProtocol) -> str:
    """Read the provider identifier once; results fall back to "" if it fails."""
    try:
        return str(provider.name)
    except Exception:
        logger.exception("Could not read geocoding provider name")
        return ""


class AddressValidationService:
    """High-level facade for address validation.

    Sequences one provider lookup, result-count triage, component
    normalization, the match heuristics and confidence scoring, then
    classifies the result. ``validate`` never raises: every failure mode
    becomes an unverifiable result.

    Example:
        >>> service = AddressValidationService()
        >>> result = service.validate("1600 Amphitheatre Pkwy, Mountain View, CA")
        >>> result.status, result.confidence
        (<ValidationStatus.CORRECTED: 'corrected'>, 0.88)

        # Custom provider
        >>> service = AddressValidationService(provider=MyGeocoder())
    """

    def __init__(
        self,
        provider: GeocodeProviderProtocol | None = None,
        *,
        confidence_threshold: float = CONFIDENCE_THRESHOLD,
    ) -> None:
        """Initialize the validation service.

        Args:
            provider: Geocoding provider. Defaults to the configured provider
                built through ProviderFactory.
            confidence_threshold: Minimum confidence for valid/corrected.
        """
        if provider is None:
            config = get_config()
            provider = ProviderFactory.create(
                config.provider,
                api_key=config.address_api_key,
                timeout=config.provider_timeout,
            )
        self._provider = provider
        self._provider_name = _provider_name(provider)
        self._confidence_threshold = confidence_threshold

    @property
    def provider(self) -> GeocodeProviderProtocol:
        """Get the provider instance."""
        return self._provider

    @property
    def confidence_threshold(self) -> float:
        return self._confidence_threshold

    def validate(self, address: Any) -> ValidationResult:
        """Validate and standardize a single address.

        Args:
            address: Free-form address string. Anything that is not a
                non-empty string is reported as unverifiable.

        Returns:
            Fully populated ValidationResult.
        """
        if not is_non_empty_string(address):
            return self._unverifiable(address, REASON_ADDRESS_REQUIRED)

        trimmed = address.strip()
        try:
            lookup = safe_lookup(self._provider, trimmed)
            if not lookup.is_ok:
                logger.error("Address validation error: %s", lookup.error)
                return self._unverifiable(address, f"{REASON_ERROR_PREFIX}{lookup.error}")
            return self._evaluate(trimmed, lookup.outcome)  # type: ignore[arg-type]
        except Exception as exc:
            logger.exception("Address validation error")
            return self._unverifiable(address, f"{REASON_ERROR_PREFIX}{exc}")

    def validate_batch(self, addresses: Sequence[Any]) -> list[ValidationResult]:
        """Validate multiple addresses sequentially.

        Args:
            addresses: Sequence of address strings.

        Returns:
            List of ValidationResult objects, one per input.
        """
        return [self.validate(address) for address in addresses]

    def validate_dataframe(
        self,
        df: pd.DataFrame,
        address_column: str,
        *,
        prefix: str = "",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Validate a DataFrame column and add one column per result field.

        Args:
            df: Input DataFrame.
            address_column: Name of the column holding address strings.
            prefix: Prefix for the new column names.
            inplace: If True, modify ``df`` instead of a copy.

        Returns:
            DataFrame with the result columns added.
        """
        from address_validator.pandas_ext import validate_addresses

        return validate_addresses(
            df,
            address_column,
            prefix=prefix,
            inplace=inplace,
            service=self,
        )

    def _evaluate(self, address: str, outcome: GeocodeOutcome) -> ValidationResult:
        count = outcome.result_count
        if count == 0:
            return self._unverifiable(address, REASON_NO_RESULTS)
        if count > 1:
            return self._unverifiable(address, REASON_MULTIPLE_MATCHES)

        result = outcome.results[0]
        standardized = normalize_components(self._provider.extract_components(result))

        has_all_components = standardized.is_complete
        accuracy = map_accuracy_tier(self._provider.accuracy_tier(result))
        exact = is_exact_match(address, self._provider.formatted_address(result))
        ratio = component_match_ratio(address, standardized)

        confidence = round_confidence(
            calculate_confidence(
                has_all_components=has_all_components,
                provider_accuracy=accuracy,
                is_exact_match=exact,
                component_match_ratio=ratio,
            )
        )

        if confidence < self._confidence_threshold:
            status = ValidationStatus.UNVERIFIABLE
        elif exact and has_all_components:
            status = ValidationStatus.VALID
        else:
            status = ValidationStatus.CORRECTED

        logger.debug(
            "Validated address: %s -> %s (confidence=%.2f)",
            address[:50],
            status.value,
            confidence,
        )
        return ValidationResult(
            status=status,
            original=address,
            standardized=standardized,
            confidence=confidence,
            provider=self._provider_name,
        )

    def _unverifiable(self, address: Any, reason: str) -> ValidationResult:
        return ValidationResult(
            status=ValidationStatus.UNVERIFIABLE,
            original=address if isinstance(address, str) else "",
            standardized=AddressComponents.empty(),
            confidence=0.0,
            provider=self._provider_name,
            reason=reason,
        )


# Module-level default service for convenience functions
_default_service: AddressValidationService | None = None


def get_default_service() -> AddressValidationService:
    """Get or create the default AddressValidationService instance.

    Returns:
        Shared AddressValidationService built from the current configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = AddressValidationService()
    return _default_service


def validate(address: Any) -> ValidationResult:
    """Validate an address using the default service.

    Args:
        address: Free-form address string.

    Returns:
        ValidationResult for the address.
    """
    return get_default_service().validate(address)
