import attrs

from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket


@attrs.frozen
class ParsedTicketRow:
    line_no: int
    ticket: Ticket


@attrs.frozen
class ImportRowError:
    line_no: int
    message: str
    raw: tuple[str, ...] = ()


@attrs.frozen
class ImportOutcome:
    imported: tuple[Ticket, ...]
    errors: tuple[ImportRowError, ...]
    oversold_show_ids: tuple[str, ...] = ()
