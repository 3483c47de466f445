"""Default reference data written on first run or after a corrupt snapshot."""

from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.person_entity import Person
from festival_ledger.service.festival.domain.entity.shift_entity import Shift
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.entity.venue_entity import Venue
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind


def seed_store() -> FestivalStore:
    return FestivalStore(
        shows=(
            Show(
                show_id='IMP25-S01',
                title='Opening Night Jam',
                venue_id='VEN-CCB',
                date='2025-10-16',
                start='19:00',
                end='20:30',
                capacity=180,
                headliner='Berlin All-Stars',
            ),
            Show(
                show_id='IMP25-S02',
                title='International Ensemble',
                venue_id='VEN-IDAN',
                date='2025-10-17',
                start='20:00',
                end='21:30',
                capacity=220,
            ),
        ),
        venues=(
            Venue(
                venue_id='VEN-CCB',
                name='Comedy Café Berlin',
                address='Roseggerstr. 17, Berlin',
                capacity=60,
                notes='Main venue',
            ),
            Venue(
                venue_id='VEN-IDAN',
                name='Ida Nowhere',
                address='Donaustr. 79, Berlin',
                capacity=30,
                notes='Partner venue',
            ),
            Venue(
                venue_id='VEN-CCBS',
                name='CCB Studios',
                address='Hasenheide 12, Berlin',
                capacity=50,
                notes='Workshop space',
            ),
        ),
        persons=(
            Person(pid='P0001', role='TECH', first='Josh', last='Telson', team='Smash Cut'),
            Person(
                pid='P0002',
                role='SANDWICH',
                first='Noah',
                last='Telson',
                team='Toasty',
                phone='911',
                lang=Locale.DE,
            ),
        ),
        shifts=(
            Shift(
                shift_id='SH001',
                venue_id='VEN-CCB',
                date='2025-10-16',
                start='17:30',
                end='22:00',
                role='FOH',
                cap=4,
            ),
        ),
        seq={
            SequenceKind.TICKET.value: 1,
            SequenceKind.SALE.value: 1,
            SequenceKind.EXP.value: 1,
            SequenceKind.SCAN.value: 1,
        },
        locale=Locale.EN,
    )
