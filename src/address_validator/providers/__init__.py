from address_validator.providers.base import (
    BaseGeocodeProvider,
    is_non_empty_string,
    safe_lookup,
)
from address_validator.providers.factory import ProviderFactory
from address_validator.providers.google import GoogleGeocodingProvider

__all__ = [
    "BaseGeocodeProvider",
    "GoogleGeocodingProvider",
    "ProviderFactory",
    "is_non_empty_string",
    "safe_lookup",
]
