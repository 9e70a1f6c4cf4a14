"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire dependencies and own the database engine for the app's lifetime."""
    Logger.base.info('🚀 [Webinar Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Webinar Service] Dependency injection wired')

    database = container.database()
    await database.create_tables()

    Logger.base.info('✅ [Webinar Service] Ready to serve requests')
    try:
        yield
    finally:
        Logger.base.info('🛑 [Webinar Service] Shutting down...')
        await database.dispose()
        container.unwire()
        Logger.base.info('👋 [Webinar Service] Shutdown complete')


app = create_app(lifespan=lifespan)
