from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ExpenseCreateRequest(BaseModel):
    date: Optional[str] = None
    cat: Optional[str] = None
    payee: Optional[str] = None
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    memo: Optional[str] = None
    paid: bool = False

    class Config:
        json_schema_extra = {
            'example': {
                'date': '2025-10-16',
                'cat': 'Catering',
                'payee': 'Späti am Eck',
                'amount': 42.5,
                'paid': True,
            }
        }


class ExpenseResponse(BaseModel):
    eid: str
    date: str
    cat: str
    payee: str
    amount: float
    paid: bool
    memo: Optional[str] = None


class LedgerSummaryResponse(BaseModel):
    sales_total: float
    by_method: Dict[str, float]
    expenses_total: float
    expenses_unpaid: float
    net: float
    tickets_sold: int
    tickets_void: int


class DailyShowLineResponse(BaseModel):
    show_id: str
    count: int
    amount: float


class DailyReportResponse(BaseModel):
    date: str
    lines: List[DailyShowLineResponse]
    total: float
