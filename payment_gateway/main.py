"""
Payment Gateway Application

Accepts card payments from merchants, forwards them to the acquiring
bank and keeps a masked record of each processed payment.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .core.config import settings
from .routes import payments_router
from .routes.payments import close_acquiring_bank
from .validation.payment_validator import TYPE_ERROR_MESSAGES

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Payment Gateway starting up...")
    logger.info(f"Acquiring bank URL: {settings.bank_base_url}")

    yield

    logger.info("Payment Gateway shutting down...")
    await close_acquiring_bank()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Card payment gateway backed by an acquiring bank",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(payments_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies in the same field -> messages shape as rule violations"""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = loc[1] if len(loc) > 1 and loc[1] in TYPE_ERROR_MESSAGES else "body"
        message = TYPE_ERROR_MESSAGES.get(field, error.get("msg", "Invalid request body."))
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    return JSONResponse(status_code=422, content=errors)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "payment-gateway",
        "bank_base_url": settings.bank_base_url,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "payment_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
