from typing import List

from fastapi import APIRouter, Depends, status

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.add_show_use_case import AddShowUseCase
from festival_ledger.service.festival.app.query.list_schedule_use_case import ListScheduleUseCase
from festival_ledger.service.festival.domain.schedule_domain import ShowDraft
from festival_ledger.service.festival.domain.value_object.rejection import Rejected
from festival_ledger.service.festival.driving_adapter.http_controller.entity_payload import (
    entity_payload,
)
from festival_ledger.service.festival.driving_adapter.http_controller.rejection_mapping import (
    raise_rejection,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schema.schedule_schema import (
    ScheduleEntryResponse,
    ShowCreateRequest,
    ShowResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_show(
    request: ShowCreateRequest,
    use_case: AddShowUseCase = Depends(AddShowUseCase.depends),
) -> ShowResponse:
    result = await use_case.execute(draft=ShowDraft(**request.model_dump()))
    if isinstance(result, Rejected):
        raise_rejection(result)
    return ShowResponse(**entity_payload(result))


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_schedule(
    q: str = '',
    use_case: ListScheduleUseCase = Depends(ListScheduleUseCase.depends),
) -> List[ScheduleEntryResponse]:
    """Schedule ordered by date and start time, with venue conflicts per show."""
    entries = await use_case.list_all(query=q)
    return [
        ScheduleEntryResponse(
            show=ShowResponse(**entity_payload(entry.show)),
            venue_name=entry.venue.name if entry.venue else None,
            conflicts=[c.show_id for c in entry.conflicts],
            sold=entry.sold,
            remaining=entry.remaining,
        )
        for entry in entries
    ]
