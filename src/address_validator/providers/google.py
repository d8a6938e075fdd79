from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

from address_validator.models import (
    AccuracyTier,
    AddressComponents,
    AddressValidatorError,
    GeocodeOutcome,
    GeocodeStatus,
)
from address_validator.providers.base import BaseGeocodeProvider

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

# Google address_components type -> (component field, which name to read)
_COMPONENT_TYPES: tuple[tuple[str, str, str], ...] = (
    ("street_number", "number", "long_name"),
    ("route", "street", "long_name"),
    ("locality", "city", "long_name"),
    ("administrative_area_level_1", "state", "short_name"),
    ("postal_code", "zip_code", "long_name"),
)


class GoogleGeocodingProvider(BaseGeocodeProvider):
    """Google Geocoding API adapter.

    Lookups are restricted to the US region. Pass ``transport`` to route
    requests through an ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: str = GOOGLE_GEOCODE_URL,
        region: str = "us",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__()
        self.api_key = api_key if api_key is not None else os.getenv("ADDRESS_API_KEY")
        self.base_url = base_url
        self.region = region
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @property
    def name(self) -> str:
        return "google-geocoding"

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def _lookup_impl(self, address: str) -> GeocodeOutcome:
        params = {"address": address, "key": self.api_key or "", "region": self.region}

        try:
            response = self._client.get(self.base_url, params=params)
        except httpx.HTTPError as exc:
            logger.error("Failed to call Google Geocoding API: %s", exc)
            raise AddressValidatorError.create(
                "provider_request",
                f"Failed to call Google Geocoding API: {exc}",
            ) from exc

        if response.is_error:
            logger.error("Google Geocoding API returned HTTP %s", response.status_code)
            raise AddressValidatorError.create(
                "provider_http_error",
                f"Google Geocoding API error: {response.status_code} {response.reason_phrase}",
                {"status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Google Geocoding API returned malformed JSON")
            raise AddressValidatorError.create(
                "provider_parse",
                "Google Geocoding API returned a malformed response",
            ) from exc

        if not isinstance(payload, dict):
            raise AddressValidatorError.create(
                "provider_parse",
                "Google Geocoding API returned a malformed response",
            )

        status = payload.get("status")
        if status == "REQUEST_DENIED":
            logger.error("Google Geocoding API denied the request")
            raise AddressValidatorError.create(
                "provider_denied",
                "Google Geocoding API key is invalid or quota exceeded",
            )

        if status == "ZERO_RESULTS":
            return GeocodeOutcome.zero_results()

        if status != "OK":
            logger.error("Google Geocoding API error status: %s", status)
            raise AddressValidatorError.create(
                "provider_status",
                f"Google Geocoding API error: {status}",
                {"status": status},
            )

        results = payload.get("results") or []
        return GeocodeOutcome(status=GeocodeStatus.OK, results=tuple(results))

    def extract_components(self, result: Any) -> AddressComponents:
        if not isinstance(result, dict) or not isinstance(result.get("address_components"), list):
            return AddressComponents.empty()

        extracted: dict[str, str] = {}
        for component in result["address_components"]:
            if not isinstance(component, dict):
                continue
            types = component.get("types") or []
            # First matching type wins, in table order
            for google_type, field_name, name_key in _COMPONENT_TYPES:
                if google_type in types:
                    extracted[field_name] = component.get(name_key) or ""
                    break

        return AddressComponents(**extracted)

    def accuracy_tier(self, result: Any) -> str:
        if isinstance(result, dict):
            geometry = result.get("geometry")
            if isinstance(geometry, dict) and geometry.get("location_type"):
                return str(geometry["location_type"])
        return AccuracyTier.APPROXIMATE.value

    def formatted_address(self, result: Any) -> str:
        if isinstance(result, dict):
            return str(result.get("formatted_address") or "")
        return ""
