from typing import Optional

from pydantic import BaseModel


class CheckinRequest(BaseModel):
    tid: str
    gate: Optional[str] = None

    class Config:
        json_schema_extra = {'example': {'tid': '25-1-000001', 'gate': 'GateA'}}


class ScanResponse(BaseModel):
    scan_id: str
    tid: str
    when: str
    time: str
    gate: str
    ok: bool
    msg: Optional[str] = None


class CheckinResponse(BaseModel):
    outcome: str
    admitted: bool
    message: str  # localized, shown to door staff
    tid: str
    show_id: Optional[str] = None
    scan: ScanResponse

    class Config:
        json_schema_extra = {
            'example': {
                'outcome': 'OK',
                'admitted': True,
                'message': 'OK — WELCOME',
                'tid': '25-1-000001',
                'show_id': 'IMP25-S01',
                'scan': {
                    'scan_id': 'SCAN-000001',
                    'tid': '25-1-000001',
                    'when': '2025-10-16',
                    'time': '18:45',
                    'gate': 'GateA',
                    'ok': True,
                    'msg': 'OK',
                },
            }
        }
