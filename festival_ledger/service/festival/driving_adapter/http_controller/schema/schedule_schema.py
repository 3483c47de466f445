from typing import List, Optional

from pydantic import BaseModel, Field

from festival_ledger.service.festival.domain.enum.show_category import ShowCategory


class ShowCreateRequest(BaseModel):
    # Optional so that missing fields come back as a MISSING_FIELD rejection
    title: Optional[str] = None
    venue_id: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=r'^\d{4}-\d{2}-\d{2}$')
    start: Optional[str] = Field(default=None, pattern=r'^\d{2}:\d{2}$')
    end: Optional[str] = Field(default=None, pattern=r'^\d{2}:\d{2}$')
    capacity: Optional[int] = None
    category: ShowCategory = ShowCategory.SHOW
    headliner: Optional[str] = None
    tech_notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Late Night Longform',
                'venue_id': 'VEN-CCB',
                'date': '2025-10-16',
                'start': '21:00',
                'end': '22:30',
                'capacity': 60,
                'category': 'Show',
            }
        }


class ShowResponse(BaseModel):
    show_id: str
    title: str
    venue_id: str
    date: str
    start: str
    end: str
    capacity: int
    category: str
    headliner: Optional[str] = None
    tech_notes: Optional[str] = None


class ScheduleEntryResponse(BaseModel):
    show: ShowResponse
    venue_name: Optional[str] = None
    conflicts: List[str]  # conflicting show ids
    sold: int
    remaining: int

    class Config:
        json_schema_extra = {
            'example': {
                'show': {
                    'show_id': 'IMP25-S01',
                    'title': 'Opening Night Jam',
                    'venue_id': 'VEN-CCB',
                    'date': '2025-10-16',
                    'start': '19:00',
                    'end': '20:30',
                    'capacity': 180,
                    'category': 'Show',
                    'headliner': 'Berlin All-Stars',
                },
                'venue_name': 'Comedy Café Berlin',
                'conflicts': [],
                'sold': 12,
                'remaining': 168,
            }
        }
