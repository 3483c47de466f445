from typing import List, Optional

from pydantic import BaseModel, Field

from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.ticket_status import TicketType


class SellTicketsRequest(BaseModel):
    show_id: str
    type: TicketType = TicketType.GA
    price: float = Field(allow_inf_nan=False)
    quantity: int = 1
    method: PaymentMethod = PaymentMethod.CASH

    class Config:
        json_schema_extra = {
            'example': {
                'show_id': 'IMP25-S01',
                'type': 'GA',
                'price': 18.0,
                'quantity': 2,
                'method': 'CARD',
            }
        }


class TicketResponse(BaseModel):
    tid: str
    show_id: str
    type: str
    price: float
    status: str
    channel: str
    sold_at: str
    sold_time: str
    buyer: str
    email: str
    notes: Optional[str] = None


class SaleRecordResponse(BaseModel):
    sid: str
    date: str
    time: str
    show_id: str
    tid: str
    method: str
    amount: float


class SaleBatchResponse(BaseModel):
    tickets: List[TicketResponse]
    sales: List[SaleRecordResponse]
    quantity: int
    amount: float
    remaining: int


class TicketImportRequest(BaseModel):
    csv_text: str

    class Config:
        json_schema_extra = {
            'example': {
                'csv_text': (
                    'tid,show_id,type,buyer,email,status,price\n'
                    'PX-1001,IMP25-S02,VIP,Ada Muster,ada@example.com,SOLD,25\n'
                )
            }
        }


class ImportRowErrorResponse(BaseModel):
    line_no: int
    message: str
    raw: List[str]


class TicketImportResponse(BaseModel):
    imported: int
    tids: List[str]
    errors: List[ImportRowErrorResponse]
    oversold_show_ids: List[str]
