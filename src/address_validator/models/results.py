"""Result classes for provider lookups and validation calls.

GeocodeOutcome and LookupResult are plain dataclasses passed between the
provider adapter and the orchestrator. ValidationResult is the frozen
pydantic model returned to callers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from address_validator.models.components import AddressComponents
from address_validator.models.enums import GeocodeStatus, ValidationStatus


@dataclass(frozen=True)
class GeocodeOutcome:
    """Successful provider response.

    Attributes:
        status: OK or ZERO_RESULTS.
        results: Raw provider results, in provider order. Opaque to the core;
            read only through the provider's extraction methods.
    """

    status: GeocodeStatus
    results: Sequence[Any] = field(default_factory=tuple)

    @classmethod
    def zero_results(cls) -> GeocodeOutcome:
        return cls(status=GeocodeStatus.ZERO_RESULTS, results=())

    @property
    def result_count(self) -> int:
        if self.status == GeocodeStatus.ZERO_RESULTS:
            return 0
        return len(self.results or ())


@dataclass(frozen=True)
class LookupResult:
    """Either the provider outcome or the error that prevented one."""

    address: str
    outcome: GeocodeOutcome | None = None
    error: Exception | None = None

    @property
    def is_ok(self) -> bool:
        """Check if the lookup produced an outcome."""
        return self.error is None and self.outcome is not None


class ValidationResult(BaseModel):
    """Outcome of validating a single address.

    ``reason`` is only ever set on unverifiable results, and only for
    diagnostics; callers should branch on ``status``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: ValidationStatus
    original: str = ""
    standardized: AddressComponents = Field(default_factory=AddressComponents)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    provider: str
    reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status == ValidationStatus.VALID

    @property
    def is_verified(self) -> bool:
        """True for valid or corrected results."""
        return self.status != ValidationStatus.UNVERIFIABLE

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload; ``reason`` is omitted when absent."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_row(self) -> dict[str, Any]:
        """Flatten into a single-level dict for tabular output."""
        return {
            "status": self.status.value,
            "original": self.original,
            "confidence": self.confidence,
            "provider": self.provider,
            "reason": self.reason,
            **self.standardized.to_dict(),
        }
