"""Registry-backed factory for geocoding providers."""

from __future__ import annotations

from typing import Any, ClassVar

from address_validator.protocols import GeocodeProviderProtocol


class ProviderFactory:
    """Factory for creating geocoding provider instances.

    Supports registration of custom provider types and creation of
    providers by type name.

    Example:
        >>> provider = ProviderFactory.create("google", api_key="...")

        # Register custom provider
        >>> ProviderFactory.register("census", CensusGeocoder)
        >>> provider = ProviderFactory.create("census")
    """

    _registry: ClassVar[dict[str, type[GeocodeProviderProtocol]]] = {}
    _default_type: ClassVar[str] = "google"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Lazily register the built-in providers."""
        if "google" not in cls._registry:
            from address_validator.providers.google import GoogleGeocodingProvider

            cls._registry["google"] = GoogleGeocodingProvider

    @classmethod
    def register(cls, name: str, impl_class: type[GeocodeProviderProtocol]) -> None:
        """Register a provider type under ``name``."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, provider_type: str | None = None, **kwargs: Any) -> GeocodeProviderProtocol:
        """Create a provider instance.

        Args:
            provider_type: Registered type name. Defaults to "google".
            **kwargs: Arguments passed to the provider constructor.

        Returns:
            Provider instance.

        Raises:
            ValueError: If the provider type is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = provider_type if provider_type is not None else cls._default_type
        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry))
            raise ValueError(
                f"Unknown provider type: {type_name}. Available types: {available}"
            )

        return cls._registry[type_name](**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry)

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
