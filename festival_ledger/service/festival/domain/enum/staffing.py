from enum import Enum


class PersonRole(Enum):
    """Roles offered when adding a person; stored people may carry other roles."""

    PERF = 'PERF'
    VOL = 'VOL'
    STAFF = 'STAFF'
    PRESS = 'PRESS'


class AssignmentStatus(Enum):
    OK = 'OK'
    DROP = 'DROP'
