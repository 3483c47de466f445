from typing import List

from fastapi import APIRouter, Depends, status

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.add_person_use_case import AddPersonUseCase
from festival_ledger.service.festival.app.command.add_shift_use_case import AddShiftUseCase
from festival_ledger.service.festival.app.command.assign_shift_use_case import AssignShiftUseCase
from festival_ledger.service.festival.app.query.list_staffing_coverage_use_case import (
    ListStaffingCoverageUseCase,
)
from festival_ledger.service.festival.app.query.search_people_use_case import SearchPeopleUseCase
from festival_ledger.service.festival.domain.staffing_domain import PersonDraft, ShiftDraft
from festival_ledger.service.festival.domain.value_object.rejection import Rejected
from festival_ledger.service.festival.driving_adapter.http_controller.entity_payload import (
    entity_payload,
)
from festival_ledger.service.festival.driving_adapter.http_controller.rejection_mapping import (
    raise_rejection,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schema.staffing_schema import (
    AssignmentCreateRequest,
    AssignmentResponse,
    PersonCreateRequest,
    PersonResponse,
    ShiftCoverageResponse,
    ShiftCreateRequest,
    ShiftResponse,
)


router = APIRouter()


@router.post('/person', status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_person(
    request: PersonCreateRequest,
    use_case: AddPersonUseCase = Depends(AddPersonUseCase.depends),
) -> PersonResponse:
    result = await use_case.execute(draft=PersonDraft(**request.model_dump()))
    if isinstance(result, Rejected):
        raise_rejection(result)
    return PersonResponse(**entity_payload(result))


@router.get('/person', status_code=status.HTTP_200_OK)
@Logger.io
async def search_people(
    q: str = '',
    use_case: SearchPeopleUseCase = Depends(SearchPeopleUseCase.depends),
) -> List[PersonResponse]:
    people = await use_case.execute(query=q)
    return [PersonResponse(**entity_payload(p)) for p in people]


@router.post('/shift', status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_shift(
    request: ShiftCreateRequest,
    use_case: AddShiftUseCase = Depends(AddShiftUseCase.depends),
) -> ShiftResponse:
    result = await use_case.execute(draft=ShiftDraft(**request.model_dump()))
    if isinstance(result, Rejected):
        raise_rejection(result)
    return ShiftResponse(**entity_payload(result))


@router.post('/assignment', status_code=status.HTTP_201_CREATED)
@Logger.io
async def assign_shift(
    request: AssignmentCreateRequest,
    use_case: AssignShiftUseCase = Depends(AssignShiftUseCase.depends),
) -> AssignmentResponse:
    result = await use_case.execute(pid=request.pid, shift_id=request.shift_id, notes=request.notes)
    if isinstance(result, Rejected):
        raise_rejection(result)
    return AssignmentResponse(**entity_payload(result))


@router.get('/coverage', status_code=status.HTTP_200_OK)
@Logger.io
async def list_staffing_coverage(
    use_case: ListStaffingCoverageUseCase = Depends(ListStaffingCoverageUseCase.depends),
) -> List[ShiftCoverageResponse]:
    """Needed vs assigned per shift. Over- and under-staffing are reported, never rejected."""
    rows = await use_case.execute()
    return [
        ShiftCoverageResponse(
            shift=ShiftResponse(**entity_payload(row.shift)),
            needed=row.shift.cap,
            assigned=row.assigned,
            open=row.open,
            overstaffed=row.overstaffed,
        )
        for row in rows
    ]
