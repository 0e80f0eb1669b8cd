"""
vLedger FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

import uvicorn
from fastapi import FastAPI

from vledger.config import get_settings
from vledger.logging_config import configure_logging
from vledger.api.health import router as health_router
from vledger.api.accounts import router as accounts_router
from vledger.api.transactions import router as transactions_router
from vledger.api.reports import router as reports_router

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry bookkeeping ledger",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(reports_router)


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "vledger.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
