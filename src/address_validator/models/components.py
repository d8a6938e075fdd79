"""Address component model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AddressComponents(BaseModel):
    """The five address fields used for standardization.

    Every field defaults to an empty string; emptiness means "missing",
    never an error. The ZIP code is exposed as ``zip_code`` in Python and
    serialized as ``zipCode``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    number: str = Field(default="", description="Street number, e.g. '1600'")
    street: str = Field(default="", description="Street name including its type")
    city: str = Field(default="", description="City or locality name")
    state: str = Field(default="", description="State name or abbreviation")
    zip_code: str = Field(default="", alias="zipCode", description="Postal code")

    @field_validator("number", "street", "city", "state", "zip_code", mode="before")
    @classmethod
    def _coerce_missing(cls, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            return str(value)
        return value

    @classmethod
    def empty(cls) -> AddressComponents:
        """All-empty components, used when nothing could be resolved."""
        return cls()

    @property
    def is_complete(self) -> bool:
        """True when every component is non-empty."""
        return all(self.values())

    def values(self) -> tuple[str, ...]:
        """Component values in serialized field order."""
        return (self.number, self.street, self.city, self.state, self.zip_code)

    def to_dict(self) -> dict[str, str]:
        """Serialize using the public (camelCase) field names."""
        return self.model_dump(by_alias=True)
