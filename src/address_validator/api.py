"""FastAPI service exposing address validation over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException

from address_validator.providers import is_non_empty_string
from address_validator.service import AddressValidationService

logger = logging.getLogger(__name__)

SERVICE_NAME = "address-validator"


class ValidateAddressRequest(BaseModel):
    """Request body for POST /validate-address."""

    model_config = ConfigDict(extra="ignore")

    # Left untyped so non-string input gets the package's own 400 response
    address: Any = None


class ErrorResponse(BaseModel):
    error: str
    message: str
    statusCode: int  # noqa: N815


def error_response(error: str, message: str, status_code: int = 500) -> JSONResponse:
    """Build a JSON error response in the standard envelope."""
    body = ErrorResponse(error=error, message=message, statusCode=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def invalid_request(message: str = "Invalid request") -> JSONResponse:
    return error_response("Invalid request", message, 400)


def not_found(message: str = "Resource not found") -> JSONResponse:
    return error_response("Not found", message, 404)


def handle_error(error: Exception, context: str = "Unknown") -> JSONResponse:
    """Log an unexpected error and map it to an HTTP error response.

    Messages mentioning "required" or "Invalid" become 400s, messages
    mentioning "not found" become 404s, everything else is a 500 with a
    generic message.
    """
    logger.error("Error in %s: %s", context, error, exc_info=error)

    message = str(error)
    if "required" in message or "Invalid" in message:
        return error_response("Internal server error", message, 400)
    if "not found" in message:
        return error_response("Internal server error", message, 404)
    return error_response("Internal server error", "An unexpected error occurred", 500)


def create_app(service: Optional[AddressValidationService] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Validation service to use. When omitted, one is built from
            the environment configuration on the first request.

    Returns:
        Configured FastAPI app.
    """
    app = FastAPI(title="Address Validator API", version="1.0.0")
    app.state.service = service

    def get_service(request: Request) -> AddressValidationService:
        if request.app.state.service is None:
            request.app.state.service = AddressValidationService()
        return request.app.state.service

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Any) -> Any:
        logger.info("%s %s", request.method, request.url.path)
        try:
            return await call_next(request)
        except Exception as exc:
            return handle_error(exc, "HTTP middleware")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code in (404, 405):
            return not_found(f"Route {request.method} {request.url.path} not found")
        return error_response("Internal server error", str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return invalid_request("Request body must be a JSON object")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": SERVICE_NAME}

    @app.post("/validate-address", response_model=None)
    def validate_address(
        body: ValidateAddressRequest,
        svc: AddressValidationService = Depends(get_service),  # noqa: B008
    ) -> Any:
        """Validate and standardize a US address."""
        if not is_non_empty_string(body.address):
            return invalid_request("Address is required and must be a non-empty string")

        result = svc.validate(body.address)
        return JSONResponse(status_code=200, content=result.to_dict())

    return app


app = create_app()

# To run: uvicorn address_validator.api:app --host 0.0.0.0 --port 3000
