from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from address_validator.models import (
    AddressComponents,
    AddressValidatorError,
    GeocodeOutcome,
    LookupResult,
)

if TYPE_CHECKING:
    from address_validator.protocols import GeocodeProviderProtocol

logger = logging.getLogger(__name__)


def is_non_empty_string(value: Any) -> bool:
    """Check if a value is a string with at least one non-space character."""
    return isinstance(value, str) and bool(value.strip())


class BaseGeocodeProvider(ABC):
    """Abstract base class for geocoding providers.

    Provides input checking, failure logging and lookup statistics.
    Subclasses implement _lookup_impl and the extraction methods.
    """

    def __init__(self) -> None:
        """Initialize the provider."""
        self._lookup_count = 0
        self._error_count = 0
        # Providers are shared across request threads
        self._stats_lock = threading.Lock()

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this provider implementation."""
        ...

    @abstractmethod
    def _lookup_impl(self, address: str) -> GeocodeOutcome:
        """Internal implementation of the geocoding call.

        Args:
            address: Trimmed, non-empty address string.

        Returns:
            GeocodeOutcome for the address.

        Raises:
            Exception: If the upstream call fails.
        """
        ...

    @abstractmethod
    def extract_components(self, result: Any) -> AddressComponents: ...

    @abstractmethod
    def accuracy_tier(self, result: Any) -> str: ...

    @abstractmethod
    def formatted_address(self, result: Any) -> str: ...

    def lookup(self, address: str) -> GeocodeOutcome:
        """Geocode a single address string.

        Args:
            address: Free-form address string.

        Returns:
            GeocodeOutcome with the provider's raw results.

        Raises:
            AddressValidatorError: If the address is empty or the lookup fails.
        """
        if not is_non_empty_string(address):
            raise AddressValidatorError.create(
                "invalid_input",
                "Address is required and must be a non-empty string",
            )

        with self._stats_lock:
            self._lookup_count += 1
        try:
            outcome = self._lookup_impl(address.strip())
        except Exception as e:
            with self._stats_lock:
                self._error_count += 1
            logger.warning(
                "%s lookup failed for address: %s - %s",
                self.name,
                address[:50],
                str(e),
            )
            raise

        logger.debug(
            "%s returned %d result(s) for address: %s",
            self.name,
            outcome.result_count,
            address[:50],
        )
        return outcome

    @property
    def stats(self) -> dict[str, int]:
        """Get lookup statistics.

        Returns:
            Dict with lookup_count and error_count.
        """
        with self._stats_lock:
            return {
                "lookup_count": self._lookup_count,
                "error_count": self._error_count,
            }

    def reset_stats(self) -> None:
        """Reset lookup statistics."""
        with self._stats_lock:
            self._lookup_count = 0
            self._error_count = 0


def safe_lookup(provider: GeocodeProviderProtocol, address: str) -> LookupResult:
    """Call ``provider.lookup`` and capture any failure as a value.

    Args:
        provider: Provider to query.
        address: Trimmed address string.

    Returns:
        LookupResult holding either the outcome or the error.
    """
    try:
        outcome = provider.lookup(address)
    except Exception as exc:
        return LookupResult(address=address, error=exc)
    return LookupResult(address=address, outcome=outcome)
