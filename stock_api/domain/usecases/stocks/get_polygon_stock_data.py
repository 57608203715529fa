from datetime import date, datetime, timedelta
from typing import Optional

from stock_api.domain.errors import InvalidRequestError, NotFoundError
from stock_api.domain.models.stock import StockDataPoint, StockDataResponse
from stock_api.domain.repositories.market_data_client import MarketDataClient
from stock_api.utils.logger import logger

INTERVALS = {
    '1day': '1/day',
    '1week': '1/week',
    '1month': '1/month',
}
DEFAULT_INTERVAL = '1/day'

_EPOCH = datetime(1970, 1, 1)


def to_polygon_interval(interval: Optional[str]) -> str:
    """Map 1day/1week/1month to the provider path segment; anything else is daily."""
    return INTERVALS.get(interval, DEFAULT_INTERVAL)


def epoch_millis_to_date(millis: int) -> date:
    return (_EPOCH + timedelta(milliseconds=millis)).date()


class GetPolygonStockDataUseCase:
    """Use case for proxying OHLCV data from the remote provider."""

    def __init__(self, client: MarketDataClient):
        self.client = client

    def execute(self, symbol: str, interval: Optional[str], from_date: str, to_date: str) -> StockDataResponse:
        if not symbol or not from_date or not to_date:
            raise InvalidRequestError('symbol, from, and to are required')

        response = self.client.get_aggregates(symbol, to_polygon_interval(interval), from_date, to_date)

        if not response.results:
            raise NotFoundError(f'No OHLC data found for {symbol} in the given range.')

        data = [
            StockDataPoint(
                time=epoch_millis_to_date(item.t),
                open=item.o,
                high=item.h,
                low=item.l,
                close=item.c,
                volume=item.v
            )
            for item in response.results
        ]
        logger.info(f'{symbol}: {len(data)} registros recebidos do provedor')

        dates = [point.time for point in data]
        return StockDataResponse.build(symbol, min(dates), max(dates), data)
