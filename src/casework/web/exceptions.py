"""Error handlers for the REST API.

Every handled error is returned as ``{error, error_type, details}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from casework.application.config import ConfigError, RulesError
from casework.infrastructure.exporters import UnsupportedFormatError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(RulesError)
    async def rules_error_handler(request: Request, exc: RulesError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "rules",
                "details": exc.details or None,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
