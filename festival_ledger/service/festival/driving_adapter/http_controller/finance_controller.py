from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.command.add_expense_use_case import AddExpenseUseCase
from festival_ledger.service.festival.app.query.get_daily_report_use_case import (
    GetDailyReportUseCase,
)
from festival_ledger.service.festival.app.query.get_ledger_summary_use_case import (
    GetLedgerSummaryUseCase,
)
from festival_ledger.service.festival.domain.staffing_domain import ExpenseDraft
from festival_ledger.service.festival.domain.value_object.rejection import Rejected
from festival_ledger.service.festival.driven_adapter.report.z_report_renderer import (
    render_z_report,
    z_report_filename,
)
from festival_ledger.service.festival.driving_adapter.http_controller.entity_payload import (
    entity_payload,
)
from festival_ledger.service.festival.driving_adapter.http_controller.rejection_mapping import (
    raise_rejection,
)
from festival_ledger.service.festival.driving_adapter.http_controller.schema.finance_schema import (
    DailyReportResponse,
    DailyShowLineResponse,
    ExpenseCreateRequest,
    ExpenseResponse,
    LedgerSummaryResponse,
)


router = APIRouter()


@router.post('/expense', status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_expense(
    request: ExpenseCreateRequest,
    use_case: AddExpenseUseCase = Depends(AddExpenseUseCase.depends),
) -> ExpenseResponse:
    result = await use_case.execute(draft=ExpenseDraft(**request.model_dump()))
    if isinstance(result, Rejected):
        raise_rejection(result)
    return ExpenseResponse(**entity_payload(result))


@router.get('/summary', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ledger_summary(
    use_case: GetLedgerSummaryUseCase = Depends(GetLedgerSummaryUseCase.depends),
) -> LedgerSummaryResponse:
    summary = await use_case.execute()
    return LedgerSummaryResponse(
        sales_total=summary.sales_total,
        by_method={method.value: amount for method, amount in summary.by_method.items()},
        expenses_total=summary.expenses_total,
        expenses_unpaid=summary.expenses_unpaid,
        net=summary.net,
        tickets_sold=summary.tickets_sold,
        tickets_void=summary.tickets_void,
    )


@router.get('/daily-report', status_code=status.HTTP_200_OK)
@Logger.io
async def get_daily_report(
    date: Optional[str] = None,
    use_case: GetDailyReportUseCase = Depends(GetDailyReportUseCase.depends),
) -> DailyReportResponse:
    report = await use_case.execute(date=date)
    return DailyReportResponse(
        date=report.date,
        lines=[DailyShowLineResponse(**entity_payload(line)) for line in report.lines],
        total=report.total,
    )


@router.get('/z-report', status_code=status.HTTP_200_OK, response_class=PlainTextResponse)
@Logger.io
async def download_z_report(
    date: Optional[str] = None,
    use_case: GetDailyReportUseCase = Depends(GetDailyReportUseCase.depends),
) -> PlainTextResponse:
    report = await use_case.execute(date=date)
    return PlainTextResponse(
        content=render_z_report(report),
        headers={
            'Content-Disposition': f'attachment; filename="{z_report_filename(report.date)}"'
        },
    )
