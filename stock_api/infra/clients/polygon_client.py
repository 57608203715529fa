from decimal import Decimal
from urllib.parse import quote

import requests
from pydantic import ValidationError

from stock_api.domain.errors import InternalFailureError, UpstreamFailureError
from stock_api.domain.models.polygon import PolygonResponse
from stock_api.domain.repositories.market_data_client import MarketDataClient
from stock_api.utils.logger import logger


class PolygonClient(MarketDataClient):
    """Client for the Polygon.io aggregates endpoint."""

    def __init__(self, api_key: str, base_url: str = 'https://api.polygon.io',
                 timeout: float = 10.0, session: requests.Session = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_url(self, symbol: str, interval: str, from_date: str, to_date: str) -> str:
        return (
            f'{self.base_url}/v2/aggs/ticker/{quote(symbol, safe="")}'
            f'/range/{interval}/{from_date}/{to_date}'
        )

    def get_aggregates(self, symbol: str, interval: str, from_date: str, to_date: str) -> PolygonResponse:
        url = self.build_url(symbol, interval, from_date, to_date)
        params = {
            'adjusted': 'true',
            'sort': 'asc',
            'limit': 50000,
            'apiKey': self.api_key
        }
        logger.info(f'Fetching aggregates: {url}')

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise InternalFailureError(f'Error contacting market data provider: {str(e)}') from e

        if not response.ok:
            raise UpstreamFailureError(response.status_code, f'Network error: {response.status_code}')

        try:
            return PolygonResponse.model_validate(response.json(parse_float=Decimal))
        except (ValueError, ValidationError) as e:
            raise InternalFailureError(f'Invalid response from market data provider: {str(e)}') from e
