"""
Snapshot document codec

One JSON object holding every collection, the sequence map and the locale.
Keys are camelCase (``showId``, ``soldAt`` ...) so documents written by earlier
tooling and backups stay readable.
"""

from enum import Enum
from typing import Any

import attrs
import orjson

from festival_ledger.platform.exception.exceptions import PersistenceError
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.expense_entity import Expense
from festival_ledger.service.festival.domain.entity.person_entity import Person
from festival_ledger.service.festival.domain.entity.sale_entity import Sale
from festival_ledger.service.festival.domain.entity.scan_entity import Scan
from festival_ledger.service.festival.domain.entity.shift_entity import Assignment, Shift
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.entity.venue_entity import Venue
from festival_ledger.service.festival.domain.enum.locale import Locale


COLLECTIONS: dict[str, type] = {
    'tickets': Ticket,
    'shows': Show,
    'venues': Venue,
    'persons': Person,
    'shifts': Shift,
    'assigns': Assignment,
    'sales': Sale,
    'expenses': Expense,
    'scans': Scan,
}


def to_camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def _encode_entity(entity: Any) -> dict[str, Any]:
    return {
        to_camel(a.name): (value.value if isinstance(value, Enum) else value)
        for a in attrs.fields(type(entity))
        if (value := getattr(entity, a.name)) is not None
    }


def _decode_entity(cls: type, raw: Any) -> Any:
    if not isinstance(raw, dict):
        raise PersistenceError(f'Expected an object for {cls.__name__}, got {type(raw).__name__}')

    kwargs = {}
    for a in attrs.fields(cls):
        key = to_camel(a.name)
        if key not in raw:
            continue
        value = raw[key]
        if value is not None and isinstance(a.type, type) and issubclass(a.type, Enum):
            value = a.type(value)
        kwargs[a.name] = value
    return cls(**kwargs)


def store_to_document(store: FestivalStore) -> dict[str, Any]:
    document: dict[str, Any] = {
        name: [_encode_entity(e) for e in getattr(store, name)] for name in COLLECTIONS
    }
    document['seq'] = dict(store.seq)
    document['locale'] = store.locale.value
    return document


def document_to_store(document: Any) -> FestivalStore:
    if not isinstance(document, dict):
        raise PersistenceError('Snapshot document must be a JSON object')

    try:
        collections = {}
        for name, cls in COLLECTIONS.items():
            rows = document.get(name) or []
            if not isinstance(rows, list):
                raise PersistenceError(f'Snapshot collection {name!r} must be a list')
            collections[name] = tuple(_decode_entity(cls, row) for row in rows)

        seq = document.get('seq') or {}
        if not isinstance(seq, dict):
            raise PersistenceError("Snapshot 'seq' must be an object")

        return FestivalStore(
            **collections,
            seq={str(k): int(v) for k, v in seq.items()},
            locale=Locale(document.get('locale') or Locale.EN.value),
        )
    except PersistenceError:
        raise
    except (TypeError, ValueError) as e:
        raise PersistenceError(f'Malformed snapshot document: {e}') from e


def encode_snapshot(store: FestivalStore) -> bytes:
    return orjson.dumps(store_to_document(store))


def decode_snapshot(data: bytes | str) -> FestivalStore:
    try:
        document = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise PersistenceError(f'Snapshot is not valid JSON: {e}') from e
    return document_to_store(document)
