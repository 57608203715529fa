from abc import ABC, abstractmethod

from stock_api.domain.models.polygon import PolygonResponse


class MarketDataClient(ABC):
    """Interface for the remote market-data provider."""

    @abstractmethod
    def get_aggregates(self, symbol: str, interval: str, from_date: str, to_date: str) -> PolygonResponse:
        """Fetch OHLCV aggregates for a symbol between two YYYY-MM-DD dates.

        `interval` is already in the provider's path form (e.g. '1/day').
        """
        pass
