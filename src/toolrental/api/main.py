"""
Tool Rental API

REST API for computing tool rental agreements.

Endpoints:
    GET  /health          - Liveness check with catalog counts
    GET  /tools           - Tool catalog
    GET  /tools/{code}    - One tool
    GET  /holidays/{year} - Observed holidays for a year
    POST /agreements      - Compute a rental agreement

Run:
    toolrental serve
    uvicorn --factory toolrental.api.main:create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..catalog import ReferenceData, load_reference_data
from ..config import RuntimeConfig, configure_logging, logging_configured
from ..engine import RentalAgreementBuilder
from ..exceptions import ConfigurationError, ValidationError
from .routes import agreements, holidays, tools
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


# =============================================================================
# Error Handlers
# =============================================================================

async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Bad checkout input: 422 with the error code and field."""
    return JSONResponse(status_code=422, content=exc.to_dict())


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Broken reference data: 500."""
    logger.error("Reference data error: %s", exc, extra={"error_code": exc.code})
    return JSONResponse(status_code=500, content=exc.to_dict())


# =============================================================================
# App Factory
# =============================================================================

def create_app(reference_data: Optional[ReferenceData] = None) -> FastAPI:
    """
    Build the API around loaded reference data.

    Args:
        reference_data: Data to serve. Defaults to TOOLRENTAL_DATA_DIR or the
            bundled data.

    Raises:
        ConfigurationError: If the default reference data cannot be loaded
    """
    runtime = RuntimeConfig.from_env()
    if not logging_configured():
        configure_logging(runtime.log_level, json_format=runtime.log_format == "json")
    if reference_data is None:
        reference_data = load_reference_data()

    app = FastAPI(
        title="Tool Rental",
        description="Tool rental agreements with holiday-aware billing",
        version=__version__,
        docs_url="/docs" if runtime.docs_enabled else None,
        redoc_url="/redoc" if runtime.docs_enabled else None,
        openapi_url="/openapi.json" if runtime.docs_enabled else None,
    )
    app.state.reference_data = reference_data
    app.state.builder = RentalAgreementBuilder.from_reference_data(reference_data)

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    # Include routers
    app.include_router(tools.router)
    app.include_router(holidays.router)
    app.include_router(agreements.router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Liveness check."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            tools=len(reference_data.catalog),
            holidays=len(reference_data.holiday_specs),
            source=reference_data.source,
        )

    logger.info(
        "API ready: %d tools from %s",
        len(reference_data.catalog), reference_data.source,
        extra={"source": reference_data.source},
    )
    return app
