"""Tests for GET /api/stocks."""

from datetime import date
from decimal import Decimal

from fastapi import status
from fastapi.testclient import TestClient


class TestGetStocks:
    """Tests for the local file endpoint."""

    def test_returns_rows_within_range(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '20250101', 'endDate': '20250120'})
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['symbol'] == 'TEST'
        assert body['startDate'] == '2025-01-01'
        assert body['endDate'] == '2025-01-20'
        assert body['dataPoints'] == 1
        point = body['data'][0]
        assert point['time'] == '2025-01-15'
        assert Decimal(point['open']) == Decimal('100')
        assert Decimal(point['high']) == Decimal('105')
        assert Decimal(point['low']) == Decimal('99')
        assert Decimal(point['close']) == Decimal('103')
        assert Decimal(point['volume']) == Decimal('1000')

    def test_returns_all_rows_in_file_order(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '20250101', 'endDate': '20250131'})
        body = response.json()
        assert body['dataPoints'] == len(body['data']) == 2
        assert [p['time'] for p in body['data']] == ['2025-01-15', '2025-01-25']

    def test_every_row_lies_within_range(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'hist', 'startDate': '20240301', 'endDate': '20240331'})
        body = response.json()
        assert body['dataPoints'] == len(body['data']) > 0
        for point in body['data']:
            assert date(2024, 3, 1) <= date.fromisoformat(point['time']) <= date(2024, 3, 31)

    def test_symbol_is_case_insensitive(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'TeSt', 'startDate': '20250101', 'endDate': '20250131'})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()['symbol'] == 'TEST'

    def test_repeated_calls_are_identical(self, client: TestClient):
        params = {'symbol': 'test', 'startDate': '20250101', 'endDate': '20250131'}
        assert client.get('/api/stocks', params=params).json() == client.get('/api/stocks', params=params).json()

    def test_empty_symbol_returns_400(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': '', 'startDate': '20250101', 'endDate': '20250131'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'required' in response.json()['detail']

    def test_empty_dates_return_400(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '', 'endDate': ''})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_symbol_returns_404(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'nonexistent', 'startDate': '20250101', 'endDate': '20250131'})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_no_rows_in_range_returns_404(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '20200101', 'endDate': '20200131'})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['detail'] == 'No data found for the specified criteria'

    def test_undecodable_line_is_skipped(self, client: TestClient, data_folder):
        """A line with invalid UTF-8 bytes is dropped, not the whole file."""
        (data_folder / 'bad.us.txt').write_bytes(
            b'<TICKER>,<PER>,<DATE>,<TIME>,<OPEN>,<HIGH>,<LOW>,<CLOSE>,<VOL>,<OPENINT>\n'
            b'BAD.US,D,20250115,000000,100,105,99,103,1000,0\n'
            b'BAD.US,D,20250116,000000,\xff\xfe,105,99,103,1000,0\n'
        )
        response = client.get('/api/stocks', params={'symbol': 'bad', 'startDate': '20250101', 'endDate': '20250131'})
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['dataPoints'] == 1
        assert body['data'][0]['time'] == '2025-01-15'

    def test_malformed_date_returns_500(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '2025-01-01', 'endDate': '20250131'})
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert 'yyyyMMdd' in response.json()['detail']

    def test_missing_file_wins_over_malformed_date(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'nonexistent', 'startDate': 'bad', 'endDate': 'bad'})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_timing_headers_are_set(self, client: TestClient):
        response = client.get('/api/stocks', params={'symbol': 'test', 'startDate': '20250101', 'endDate': '20250131'})
        assert response.headers['X-Response-Time'].endswith('ms')
        assert response.headers['X-Request-ID']
