"""Environment-driven configuration.

Settings come from process environment variables. ``ValidatorConfig.from_env``
loads the nearest ``.env`` file first; variables already set in the
environment take precedence over the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from address_validator.models import AddressValidatorError

# Results scoring below this are reported as unverifiable
CONFIDENCE_THRESHOLD = 0.7

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class ValidatorConfig:
    """Runtime settings, read from the environment when constructed."""

    address_api_key: Optional[str] = field(default_factory=lambda: os.getenv("ADDRESS_API_KEY"))
    provider: str = field(default_factory=lambda: os.getenv("ADDRESS_PROVIDER", "google"))
    provider_timeout: float = field(
        default_factory=lambda: float(os.getenv("ADDRESS_PROVIDER_TIMEOUT", "10"))
    )
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    confidence_threshold: float = CONFIDENCE_THRESHOLD

    @classmethod
    def from_env(cls, env_file: Union[str, Path, None] = None) -> ValidatorConfig:
        """Load ``.env`` into the environment, then read the settings.

        Args:
            env_file: Path to the dotenv file. Defaults to the nearest
                ``.env`` found from the current working directory.

        Returns:
            ValidatorConfig built from the merged environment.
        """
        load_env_file(env_file)
        return cls()


def load_env_file(env_file: Union[str, Path, None] = None) -> bool:
    """Load a dotenv file without overriding variables already set.

    Returns:
        True if a file was found and loaded.
    """
    path = env_file if env_file is not None else find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(path, override=False)


def validate_config(config: ValidatorConfig) -> None:
    """Check that required settings are present.

    Raises:
        AddressValidatorError: If ADDRESS_API_KEY is not set.
    """
    if not config.address_api_key:
        raise AddressValidatorError.create(
            "config_error",
            "ADDRESS_API_KEY is required. Please set it in your environment or .env file.",
        )


_default_config: ValidatorConfig | None = None


def get_config() -> ValidatorConfig:
    """Get the process-wide configuration, building it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = ValidatorConfig.from_env()
    return _default_config


def reset_config() -> None:
    """Forget the cached configuration (mainly for testing)."""
    global _default_config
    _default_config = None


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler with the package log format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
