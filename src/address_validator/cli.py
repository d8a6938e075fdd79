from __future__ import annotations

import json
import logging
from typing import Optional

import typer
import uvicorn

from address_validator.config import ValidatorConfig, configure_logging, validate_config
from address_validator.models import AddressValidatorError
from address_validator.providers import ProviderFactory
from address_validator.service import AddressValidationService

logger = logging.getLogger(__name__)

app = typer.Typer(help="Validate and standardize US postal addresses.")


def build_service(
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> AddressValidationService:
    """Build a service from CLI options, falling back to the environment."""
    config = ValidatorConfig.from_env()
    geocoder = ProviderFactory.create(
        provider or config.provider,
        api_key=api_key or config.address_api_key,
        timeout=timeout if timeout is not None else config.provider_timeout,
    )
    return AddressValidationService(geocoder, confidence_threshold=config.confidence_threshold)


@app.command()
def validate(
    address: str = typer.Argument(..., help="Free-form address to validate."),  # noqa: B008
    provider: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--provider",
        "-p",
        help="Registered provider type (default: $ADDRESS_PROVIDER or 'google').",
    ),
    api_key: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--api-key",
        help="Provider API key (default: $ADDRESS_API_KEY).",
    ),
    timeout: Optional[float] = typer.Option(  # noqa: B008
        None,
        "--timeout",
        help="Provider request timeout in seconds.",
    ),
    compact: bool = typer.Option(  # noqa: B008
        False,
        "--compact",
        help="Print single-line JSON.",
    ),
) -> None:
    """Validate one address and print the result as JSON."""
    try:
        service = build_service(provider, api_key, timeout)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    result = service.validate(address)
    typer.echo(json.dumps(result.to_dict(), indent=None if compact else 2))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address."),  # noqa: B008
    port: Optional[int] = typer.Option(None, "--port", help="Bind port."),  # noqa: B008
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),  # noqa: B008
) -> None:
    """Run the HTTP API with uvicorn."""
    config = ValidatorConfig.from_env()
    try:
        validate_config(config)
    except AddressValidatorError as exc:
        typer.echo(f"Failed to start server: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    configure_logging(config.log_level)
    bind_host = host or config.host
    bind_port = port or config.port

    logger.info("Server running on port %d", bind_port)
    logger.info("Address validation endpoint: http://%s:%d/validate-address", bind_host, bind_port)
    logger.info("Health check: http://%s:%d/health", bind_host, bind_port)

    uvicorn.run(
        "address_validator.api:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
