import orjson
import pytest

from festival_ledger.platform.exception.exceptions import PersistenceError
from festival_ledger.service.festival.domain.entity.scan_entity import Scan
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.ticket_status import (
    SalesChannel,
    TicketStatus,
    TicketType,
)
from festival_ledger.service.festival.driven_adapter.persistence.snapshot_codec import (
    decode_snapshot,
    document_to_store,
    encode_snapshot,
    store_to_document,
    to_camel,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def busy_store(seed):
    return seed.appended(
        tickets=(
            Ticket(
                tid='25-1-000001',
                show_id='IMP25-S01',
                type=TicketType.VIP,
                price=25.0,
                status=TicketStatus.USED,
                channel=SalesChannel.PRESALE,
                sold_at='2025-10-01',
                sold_time='12:00',
                buyer='Ada',
            ),
        ),
        scans=(
            Scan(
                scan_id='SCAN-000001',
                tid='25-1-000001',
                when='2025-10-16',
                time='19:01',
                gate='Main',
                ok=True,
                msg='OK',
            ),
        ),
    ).with_seq({'TICKET': 2, 'SCAN': 2})


def test_to_camel():
    assert to_camel('show_id') == 'showId'
    assert to_camel('sold_time') == 'soldTime'
    assert to_camel('tid') == 'tid'


class TestDocument:
    def test_keys_are_camel_case_and_enums_are_values(self, busy_store):
        document = store_to_document(busy_store)

        ticket = document['tickets'][0]
        assert ticket['showId'] == 'IMP25-S01'
        assert ticket['soldAt'] == '2025-10-01'
        assert ticket['type'] == 'VIP'
        assert ticket['channel'] == 'PRESALE'
        assert document['locale'] == 'EN'
        assert document['seq'] == {'TICKET': 2, 'SCAN': 2}

    def test_unset_optional_fields_are_omitted(self, busy_store):
        document = store_to_document(busy_store)

        assert 'notes' not in document['tickets'][0]
        assert 'techNotes' not in document['shows'][0]

    def test_reload_equals_saved_store(self, busy_store):
        assert decode_snapshot(encode_snapshot(busy_store)) == busy_store

    def test_locale_survives(self, seed):
        store = document_to_store({**store_to_document(seed), 'locale': 'DE'})

        assert store.locale is Locale.DE

    def test_missing_collections_default_to_empty(self):
        store = document_to_store({'shows': []})

        assert store.tickets == ()
        assert store.seq == {}
        assert store.locale is Locale.EN


class TestMalformed:
    @pytest.mark.parametrize(
        'data',
        [
            b'not json',
            b'[1, 2, 3]',
            b'{"tickets": {"a": 1}}',
            b'{"tickets": [42]}',
            b'{"tickets": [{"tid": "T1"}]}',
            b'{"seq": [1]}',
            b'{"seq": {"TICKET": "many"}}',
            b'{"locale": "FR"}',
        ],
    )
    def test_malformed_documents_raise_persistence_error(self, data):
        with pytest.raises(PersistenceError):
            decode_snapshot(data)

    def test_entity_validation_failures_are_persistence_errors(self, seed):
        document = store_to_document(seed)
        document['shows'][0]['capacity'] = 0

        with pytest.raises(PersistenceError):
            decode_snapshot(orjson.dumps(document))

    @pytest.mark.parametrize('price', [float('inf'), float('nan'), None])
    def test_non_finite_prices_are_persistence_errors(self, busy_store, price):
        document = store_to_document(busy_store)
        document['tickets'][0]['price'] = price

        with pytest.raises(PersistenceError):
            document_to_store(document)


def test_non_finite_amounts_cannot_enter_a_ticket():
    with pytest.raises(ValueError, match='finite'):
        Ticket(
            tid='25-1-000002',
            show_id='IMP25-S01',
            type=TicketType.GA,
            price=float('inf'),
            status=TicketStatus.SOLD,
            channel=SalesChannel.ONSITE,
            sold_at='2025-10-16',
            sold_time='19:00',
            buyer='Walk-up',
        )
