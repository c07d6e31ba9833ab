import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ohcraps.api import (
    health_router,
    rules_router,
    strategies_router,
    user_strategies_router,
)
from ohcraps.config import settings
from ohcraps.services.strategy_catalog import get_strategy_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    catalog = get_strategy_catalog()
    logger.info("Strategy catalog ready with %d strategies", len(catalog))
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("ohcraps"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(rules_router)
app.include_router(strategies_router)
app.include_router(user_strategies_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
