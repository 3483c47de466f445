from typing import List

from fastapi import APIRouter, Depends, status

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.import_tickets_use_case import (
    ImportTicketsUseCase,
)
from festival_ledger.service.festival.app.command.sell_tickets_use_case import SellTicketsUseCase
from festival_ledger.service.festival.app.command.void_ticket_use_case import VoidTicketUseCase
from festival_ledger.service.festival.app.query.search_tickets_use_case import (
    SearchTicketsUseCase,
)
from festival_ledger.service.festival.domain.capacity_domain import SaleRequest
from festival_ledger.service.festival.domain.value_object.rejection import Rejected
from festival_ledger.service.festival.driving_adapter.http_controller.entity_payload import (
    entity_payload,
)
from festival_ledger.service.festival.driving_adapter.http_controller.rejection_mapping import (
    raise_rejection,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schema.box_office_schema import (
    ImportRowErrorResponse,
    SaleBatchResponse,
    SaleRecordResponse,
    SellTicketsRequest,
    TicketImportRequest,
    TicketImportResponse,
    TicketResponse,
)


router = APIRouter()


@router.post('/sale', status_code=status.HTTP_201_CREATED)
@Logger.io
async def sell_tickets(
    request: SellTicketsRequest,
    use_case: SellTicketsUseCase = Depends(SellTicketsUseCase.depends),
) -> SaleBatchResponse:
    result = await use_case.execute(
        request=SaleRequest(
            show_id=request.show_id,
            type=request.type,
            price=request.price,
            quantity=request.quantity,
            method=request.method,
        )
    )
    if isinstance(result, Rejected):
        raise_rejection(result)

    return SaleBatchResponse(
        tickets=[TicketResponse(**entity_payload(t)) for t in result.tickets],
        sales=[SaleRecordResponse(**entity_payload(s)) for s in result.sales],
        quantity=result.quantity,
        amount=result.amount,
        remaining=result.remaining,
    )


@router.post('/ticket/{tid}/void', status_code=status.HTTP_200_OK)
@Logger.io
async def void_ticket(
    tid: str,
    use_case: VoidTicketUseCase = Depends(VoidTicketUseCase.depends),
) -> TicketResponse:
    result = await use_case.execute(tid=tid)
    if isinstance(result, Rejected):
        raise_rejection(result)
    return TicketResponse(**entity_payload(result))


@router.get('/ticket', status_code=status.HTTP_200_OK)
@Logger.io
async def search_tickets(
    q: str = '',
    limit: int = 100,
    use_case: SearchTicketsUseCase = Depends(SearchTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.execute(query=q, limit=limit)
    return [TicketResponse(**entity_payload(t)) for t in tickets]


@router.post('/ticket/import', status_code=status.HTTP_200_OK)
@Logger.io
async def import_tickets(
    request: TicketImportRequest,
    use_case: ImportTicketsUseCase = Depends(ImportTicketsUseCase.depends),
) -> TicketImportResponse:
    """Bulk presale import. Rows that fail to parse are reported, the rest are imported."""
    outcome = await use_case.execute(csv_text=request.csv_text)
    return TicketImportResponse(
        imported=len(outcome.imported),
        tids=[t.tid for t in outcome.imported],
        errors=[
            ImportRowErrorResponse(line_no=e.line_no, message=e.message, raw=list(e.raw))
            for e in outcome.errors
        ],
        oversold_show_ids=list(outcome.oversold_show_ids),
    )
