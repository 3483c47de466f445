"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI

from festival_ledger.platform.config.core_setting import settings
from festival_ledger.platform.exception.exception_handlers import register_exception_handlers
from festival_ledger.service.festival.driving_adapter.http_controller.backup_controller import (
    router as backup_router,
)
from festival_ledger.service.festival.driving_adapter.http_controller.box_office_controller import (
    router as box_office_router,
)
from festival_ledger.service.festival.driving_adapter.http_controller.checkin_controller import (
    router as checkin_router,
)
from festival_ledger.service.festival.driving_adapter.http_controller.finance_controller import (
    router as finance_router,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schedule_controller import (
    router as schedule_router,
)
from festival_ledger.service.festival.driving_adapter.http_controller.staffing_controller import (
    router as staffing_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Festival Ledger',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(schedule_router, prefix='/api/show', tags=['schedule'])
    app.include_router(box_office_router, prefix='/api/box-office', tags=['box office'])
    app.include_router(checkin_router, prefix='/api/checkin', tags=['check-in'])
    app.include_router(finance_router, prefix='/api/finance', tags=['finance'])
    app.include_router(staffing_router, prefix='/api/staffing', tags=['staffing'])
    app.include_router(backup_router, prefix='/api/admin', tags=['admin'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': 'Festival Ledger'}
