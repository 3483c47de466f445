from typing import List, Optional

from fastapi import APIRouter, Depends, status

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.check_in_ticket_use_case import (
    CheckInTicketUseCase,
)
from festival_ledger.service.festival.app.query.list_recent_scans_use_case import (
    ListRecentScansUseCase,
)
from festival_ledger.service.festival.driving_adapter.http_controller.checkin_message import (
    checkin_message,
)
from festival_ledger.service.festival.driving_adapter.http_controller.entity_payload import (
    entity_payload,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schema.checkin_schema import (
    CheckinRequest,
    CheckinResponse,
    ScanResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def check_in(
    request: CheckinRequest,
    use_case: CheckInTicketUseCase = Depends(CheckInTicketUseCase.depends),
) -> CheckinResponse:
    """
    Door scan. Always 200: a refused ticket is an answer for door staff, not an
    error, and the attempt is already in the door log.
    """
    result = await use_case.execute(tid=request.tid, gate=request.gate)
    return CheckinResponse(
        outcome=result.outcome.value,
        admitted=result.admitted,
        message=checkin_message(result.outcome, result.locale),
        tid=result.scan.tid,
        show_id=result.ticket.show_id if result.ticket else None,
        scan=ScanResponse(**entity_payload(result.scan)),
    )


@router.get('/scans', status_code=status.HTTP_200_OK)
@Logger.io
async def list_recent_scans(
    limit: Optional[int] = None,
    use_case: ListRecentScansUseCase = Depends(ListRecentScansUseCase.depends),
) -> List[ScanResponse]:
    scans = await use_case.execute(limit=limit)
    return [ScanResponse(**entity_payload(s)) for s in scans]
