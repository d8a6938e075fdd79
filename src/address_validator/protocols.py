from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from address_validator.models import AddressComponents, GeocodeOutcome


@runtime_checkable
class GeocodeProviderProtocol(Protocol):
    """Protocol for geocoding providers.

    Implementations resolve a free-form address into zero or more raw
    results and expose the few pieces of those results the validation
    pipeline reads. Raw results are opaque to everything else.
    """

    def lookup(self, address: str) -> GeocodeOutcome:
        """Geocode an address.

        Args:
            address: Trimmed, non-empty address string.

        Returns:
            GeocodeOutcome; a zero-result outcome when nothing matched.

        Raises:
            AddressValidatorError: On empty input, transport or upstream failure.
        """
        ...

    def extract_components(self, result: Any) -> AddressComponents:
        """Extract raw (unnormalized) components from a provider result.

        Must not raise; malformed results yield empty components.
        """
        ...

    def accuracy_tier(self, result: Any) -> str:
        """Get the provider's accuracy tier for a result.

        Must not raise; defaults to the lowest-confidence tier.
        """
        ...

    def formatted_address(self, result: Any) -> str:
        """Get the provider's display string for a result ("" if absent)."""
        ...

    @property
    def name(self) -> str:
        """Stable provider identifier echoed into every ValidationResult."""
        ...
