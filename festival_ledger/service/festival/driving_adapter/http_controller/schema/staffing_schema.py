from typing import Optional

from pydantic import BaseModel, Field

from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.staffing import PersonRole


class PersonCreateRequest(BaseModel):
    role: PersonRole = PersonRole.VOL
    first: Optional[str] = None
    last: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    lang: Locale = Locale.EN
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'role': 'VOL',
                'first': 'Mia',
                'last': 'Kraus',
                'email': 'mia@example.com',
                'lang': 'DE',
            }
        }


class PersonResponse(BaseModel):
    pid: str
    role: str
    first: str
    last: str
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    lang: str
    notes: Optional[str] = None


class ShiftCreateRequest(BaseModel):
    venue_id: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=r'^\d{4}-\d{2}-\d{2}$')
    start: Optional[str] = Field(default=None, pattern=r'^\d{2}:\d{2}$')
    end: Optional[str] = Field(default=None, pattern=r'^\d{2}:\d{2}$')
    role: Optional[str] = None
    cap: int = 1

    class Config:
        json_schema_extra = {
            'example': {
                'venue_id': 'VEN-CCB',
                'date': '2025-10-16',
                'start': '17:30',
                'end': '22:00',
                'role': 'Door',
                'cap': 2,
            }
        }


class ShiftResponse(BaseModel):
    shift_id: str
    venue_id: str
    date: str
    start: str
    end: str
    role: str
    cap: int


class AssignmentCreateRequest(BaseModel):
    pid: str
    shift_id: str
    notes: Optional[str] = None


class AssignmentResponse(BaseModel):
    assign_id: str
    shift_id: str
    pid: str
    status: str
    notes: Optional[str] = None


class ShiftCoverageResponse(BaseModel):
    shift: ShiftResponse
    needed: int
    assigned: int
    open: int
    overstaffed: bool
