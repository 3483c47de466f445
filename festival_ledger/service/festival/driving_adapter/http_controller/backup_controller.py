from fastapi import APIRouter, Depends, Request, Response, status

from festival_ledger.platform.exception.exceptions import (
    PersistenceError,
    ValidationRejectedError,
)
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.restore_backup_use_case import (
    RestoreBackupUseCase,
)
from festival_ledger.service.festival.app.command.toggle_locale_use_case import (
    ToggleLocaleUseCase,
)
from festival_ledger.service.festival.app.query.export_backup_use_case import ExportBackupUseCase


router = APIRouter()


@router.get('/backup', status_code=status.HTTP_200_OK)
@Logger.io
async def export_backup(
    use_case: ExportBackupUseCase = Depends(ExportBackupUseCase.depends),
) -> Response:
    filename, document = await use_case.execute()
    return Response(
        content=document,
        media_type='application/json',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'},
    )


@router.post('/restore', status_code=status.HTTP_200_OK)
@Logger.io
async def restore_backup(
    request: Request,
    use_case: RestoreBackupUseCase = Depends(RestoreBackupUseCase.depends),
) -> dict[str, int]:
    """Body is a backup document as produced by GET /backup. Replaces the whole store."""
    try:
        store = await use_case.execute(document=await request.body())
    except PersistenceError as e:
        raise ValidationRejectedError(
            f'Restore failed (invalid file): {e.message}', reason='INVALID_BACKUP'
        ) from e
    return {
        'tickets': len(store.tickets),
        'shows': len(store.shows),
        'sales': len(store.sales),
        'scans': len(store.scans),
    }


@router.post('/locale/toggle', status_code=status.HTTP_200_OK)
@Logger.io
async def toggle_locale(
    use_case: ToggleLocaleUseCase = Depends(ToggleLocaleUseCase.depends),
) -> dict[str, str]:
    locale = await use_case.execute()
    return {'locale': locale.value}
