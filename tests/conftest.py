"""Shared pytest fixtures and Hypothesis configuration."""

from __future__ import annotations

import os

import pytest
from hypothesis import Verbosity, settings

from address_validator import config as config_module
from address_validator.config import reset_config
from address_validator.providers import ProviderFactory
from address_validator.service import AddressValidationService
from tests.fakes import GOOGLEPLEX, StubProvider

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


CONFIG_ENV_VARS = (
    "ADDRESS_API_KEY",
    "ADDRESS_PROVIDER",
    "ADDRESS_PROVIDER_TIMEOUT",
    "HOST",
    "PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the caller's environment, .env files and global state."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # No implicit .env discovery; tests that need it restore find_dotenv
    monkeypatch.setattr(config_module, "find_dotenv", lambda **kwargs: "")
    reset_config()
    yield
    reset_config()
    ProviderFactory.unregister("stub")
    # Drop anything a loaded .env file added; monkeypatch restores the originals
    for name in CONFIG_ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def googleplex_provider() -> StubProvider:
    return StubProvider([GOOGLEPLEX])


@pytest.fixture
def googleplex_service(googleplex_provider: StubProvider) -> AddressValidationService:
    return AddressValidationService(googleplex_provider)
