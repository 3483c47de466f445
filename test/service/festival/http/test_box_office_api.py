import pytest


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'


class TestSale:
    def test_sell_returns_tickets_and_paired_sales(self, client):
        response = client.post(
            '/api/box-office/sale',
            json={'show_id': 'IMP25-S02', 'type': 'VIP', 'price': 30, 'quantity': 2, 'method': 'CARD'},
        )

        assert response.status_code == 201
        body = response.json()
        assert [t['tid'] for t in body['tickets']] == ['25-2-000001', '25-2-000002']
        assert [s['sid'] for s in body['sales']] == ['SID-000001', 'SID-000002']
        assert body['tickets'][0]['type'] == 'VIP'
        assert body['tickets'][0]['sold_at'] == '2025-10-16'
        assert body['amount'] == 60
        assert body['remaining'] == 218

    def test_over_capacity_is_a_conflict(self, client):
        response = client.post(
            '/api/box-office/sale', json={'show_id': 'IMP25-S02', 'price': 10, 'quantity': 221}
        )

        assert response.status_code == 409
        assert response.json()['reason'] == 'CAPACITY_EXCEEDED'

    def test_unknown_show_is_not_found(self, client):
        response = client.post(
            '/api/box-office/sale', json={'show_id': 'IMP25-S99', 'price': 10, 'quantity': 1}
        )

        assert response.status_code == 404
        assert response.json()['reason'] == 'SHOW_NOT_FOUND'

    def test_zero_quantity_is_rejected_with_field(self, client):
        response = client.post(
            '/api/box-office/sale', json={'show_id': 'IMP25-S01', 'price': 10, 'quantity': 0}
        )

        assert response.status_code == 422
        assert response.json()['reason'] == 'INVALID_QUANTITY'
        assert response.json()['fields'] == ['quantity']

    def test_malformed_body_is_bad_request(self, client):
        response = client.post('/api/box-office/sale', json={'show_id': 'IMP25-S01'})

        assert response.status_code == 400

    @pytest.mark.parametrize('literal', ['Infinity', '-Infinity', 'NaN'])
    def test_non_finite_price_is_bad_request(self, client, literal):
        response = client.post(
            '/api/box-office/sale',
            content=f'{{"show_id": "IMP25-S01", "price": {literal}}}',
            headers={'Content-Type': 'application/json'},
        )

        assert response.status_code == 400
        assert response.json()['detail'][0]['loc'] == ['body', 'price']


class TestVoidAndSearch:
    def test_void_then_void_again(self, client, sold_ticket):
        first = client.post(f'/api/box-office/ticket/{sold_ticket}/void')
        second = client.post(f'/api/box-office/ticket/{sold_ticket}/void')

        assert first.status_code == 200
        assert first.json()['status'] == 'VOID'
        assert second.status_code == 409
        assert second.json()['reason'] == 'ALREADY_VOID'

    def test_void_unknown_ticket(self, client):
        response = client.post('/api/box-office/ticket/NOPE/void')

        assert response.status_code == 404

    def test_search(self, client, sold_ticket):
        response = client.get('/api/box-office/ticket', params={'q': sold_ticket.lower()})

        assert [t['tid'] for t in response.json()] == [sold_ticket]


def test_import_reports_rows(client):
    response = client.post(
        '/api/box-office/ticket/import',
        json={'csv_text': 'tid,show_id,type\nPX-1,IMP25-S01,GA\nPX-2,IMP25-S01,BALCONY\n'},
    )

    assert response.status_code == 200
    body = response.json()
    assert body['imported'] == 1
    assert body['tids'] == ['PX-1']
    assert body['errors'][0]['line_no'] == 3
    assert body['oversold_show_ids'] == []
