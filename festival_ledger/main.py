"""
Festival Ledger FastAPI Application

Run with: granian festival_ledger.main:app --interface asgi --port 8100
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from festival_ledger.platform.app_factory import create_app
from festival_ledger.platform.config.di import cleanup, container, setup
from festival_ledger.platform.config.wire_modules import WIRE_MODULES
from festival_ledger.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Festival Ledger] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Festival Ledger] Dependency injection wired')

    # Loads the snapshot (or seeds it) before the first request
    setup()
    Logger.base.info('📂 [Festival Ledger] Store ready')

    # Task group for fire-and-forget snapshot writes
    async with anyio.create_task_group() as tg:
        container.task_group.override(tg)
        Logger.base.info('✅ [Festival Ledger] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Festival Ledger] Shutting down...')
        # pending writes finish before the group exits

    container.task_group.reset_override()
    cleanup()
    container.unwire()

    Logger.base.info('👋 [Festival Ledger] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
