"""Door-staff messages for check-in outcomes, per locale."""

from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.locale import Locale


CHECKIN_MESSAGES: dict[Locale, dict[CheckinOutcome, str]] = {
    Locale.EN: {
        CheckinOutcome.OK: 'OK — WELCOME',
        CheckinOutcome.DUPLICATE: 'DUPLICATE ENTRY',
        CheckinOutcome.VOID_INVALID: 'VOID / INVALID',
        CheckinOutcome.NOT_FOUND: 'NOT FOUND',
    },
    Locale.DE: {
        CheckinOutcome.OK: 'OK — WILLKOMMEN',
        CheckinOutcome.DUPLICATE: 'BEREITS EINGELÖST',
        CheckinOutcome.VOID_INVALID: 'STORNIERT / UNGÜLTIG',
        CheckinOutcome.NOT_FOUND: 'NICHT GEFUNDEN',
    },
}


def checkin_message(outcome: CheckinOutcome, locale: Locale) -> str:
    return CHECKIN_MESSAGES[locale][outcome]
