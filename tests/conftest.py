"""Pytest configuration and fixtures."""

import random
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from stock_api.main import app
from stock_api.presentation.factories.repository_factory import build_random_source
from stock_api.utils.settings import Settings, get_settings

HEADER = '<TICKER>,<PER>,<DATE>,<TIME>,<OPEN>,<HIGH>,<LOW>,<CLOSE>,<VOL>,<OPENINT>'

TEST_FILE_LINES = [
    HEADER,
    'TEST.US,D,20250115,000000,100,105,99,103,1000,0',
    'short,line',
    'TEST.US,D,2025011X,000000,101,106,100,104,1100,0',
    'TEST.US,D,20250118,000000,abc,106,100,104,1100,0',
    '',
    'TEST.US,D,20250125,000000,104,108,103,107,1200,0',
]


def write_history_file(folder, name, start, end):
    """Write one bar per business day between start and end."""
    lines = [HEADER]
    current = start
    price = Decimal('50.00')
    while current <= end:
        if current.weekday() < 5:
            lines.append(
                f"{name.upper()}.US,D,{current.strftime('%Y%m%d')},000000,"
                f"{price},{price + 1},{price - 1},{price + Decimal('0.5')},10000,0"
            )
            price += Decimal('0.25')
        current += timedelta(days=1)
    (folder / f'{name}.us.txt').write_text('\n'.join(lines) + '\n')


@pytest.fixture
def data_folder(tmp_path):
    """Data folder with the small test file and a two-year history file."""
    (tmp_path / 'test.us.txt').write_text('\n'.join(TEST_FILE_LINES) + '\n')
    write_history_file(tmp_path, 'hist', date(2023, 1, 2), date(2024, 12, 31))
    return tmp_path


@pytest.fixture
def settings(data_folder):
    return Settings(stock_data_folder=str(data_folder), polygon_api_key='test-key')


@pytest.fixture
def client(settings):
    """TestClient with settings pointing at the temp folder and a seeded random source."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[build_random_source] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def polygon_payload():
    return {
        'ticker': 'AAPL',
        'resultsCount': 2,
        'results': [
            {'t': 1735776000000, 'o': Decimal('185.5'), 'h': Decimal('188.1'), 'l': Decimal('183.2'),
             'c': Decimal('187.0'), 'v': 52000000},
            {'t': 1735862400000, 'o': Decimal('187.2'), 'h': Decimal('190.0'), 'l': Decimal('186.4'),
             'c': Decimal('189.9'), 'v': 48000000},
        ]
    }


def make_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


@pytest.fixture
def mock_session(polygon_payload):
    session = MagicMock()
    session.get.return_value = make_response(200, polygon_payload)
    return session
