"""
PayUMoney Gateway - FastAPI Application

Merchant-side endpoints for the PayUMoney redirect flow: signed checkout,
response hash verification and transaction status queries.
"""
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .config import Settings, get_settings
from .exceptions import GatewayError
from .api.payments import router as payments_router


# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def resolve_settings(app: FastAPI) -> Settings:
    """Settings as the app sees them, honouring dependency overrides."""
    return app.dependency_overrides.get(get_settings, get_settings)()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the environment on startup. Credentials are never logged.
    """
    settings = resolve_settings(app)
    logger.info("Starting PayUMoney gateway server...")
    logger.info(f"Test mode: {settings.test_mode}")
    if not settings.merchant_key or not settings.salt.get_secret_value():
        logger.warning("Merchant key or salt not configured; signed requests will be rejected by PayU")

    yield

    logger.info("Shutting down PayUMoney gateway server...")


# Initialize FastAPI application
app = FastAPI(
    title="PayUMoney Gateway",
    description="Signed PayUMoney checkout and response verification",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    """
    Handle gateway errors with the standard error response format.

    Status code comes from the exception class (400, 422 or 502).
    """
    logger.warning(
        f"Gateway error: {exc.error_code} - {exc.message}",
        extra={"details": exc.details}
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def general_error_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unexpected errors.

    Logs full exception for debugging but returns generic message to client.
    """
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    settings = resolve_settings(request.app)

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "internal_error",
            "message": "An unexpected error occurred",
            "details": {"error_type": type(exc).__name__} if settings.test_mode else {}
        },
    )


# Health check endpoint
@app.get("/api/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        Server status and version information
    """
    return {
        "status": "healthy",
        "version": "0.1.0",
        "test_mode": settings.test_mode,
    }


# Include API routers
app.include_router(payments_router, prefix="/api/payumoney", tags=["PayUMoney"])


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "payumoney.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.test_mode,
        log_level=settings.log_level.lower()
    )
