"""
Sales Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging

from fastapi import FastAPI

from sales_ledger.config import get_settings
from sales_ledger.api.health import router as health_router
from sales_ledger.api.entries import router as entries_router
from sales_ledger.api.reports import router as reports_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Sales and cost ledger with period, customer and amount-range reports",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(entries_router)
app.include_router(reports_router)
