"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.config.logging import rest_api_logger as logger
from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware
from rest_api.core.cors import configure_cors
from rest_api.core.lifespan import lifespan
from rest_api.core.middlewares import register_middlewares
from rest_api.routers.entities import entity_routers
from rest_api.routers.public import health_router


# Create FastAPI application
app = FastAPI(
    title="Back Office REST API",
    description="Inventory and access-control back office",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Middlewares
# =============================================================================

register_middlewares(app)
configure_cors(app)

# Outermost: every log line of the request carries its id
app.add_middleware(CorrelationIdMiddleware)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and path parameters are client errors: answer 400."""
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(health_router)

for router in entity_routers:
    app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("rest_api.main:app", host="0.0.0.0", port=settings.rest_api_port, reload=settings.debug)
