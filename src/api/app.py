"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import Settings, settings
from src.api.routes import router
from src.calculators.tax_data import TaxYearData, get_tax_year, tax_year_from_config

logger = logging.getLogger(__name__)


def resolve_rates(config: Settings) -> TaxYearData:
    """Pick the rate tables named by settings: a YAML file, else a built-in year."""
    if config.uses_rates_file:
        logger.info("Loading rate tables from config/%s", config.rates_config)
        return tax_year_from_config(config.rates_config)
    return get_tax_year(config.tax_year)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging and resolve the active tax year."""
    logging.basicConfig(level=settings.log_level.upper())
    app.state.rates = resolve_rates(settings)
    logger.info("Starting up with %s tables...", app.state.rates.label)

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="UK Take-Home Pay Calculator", lifespan=lifespan)
    app.include_router(router)
    return app
