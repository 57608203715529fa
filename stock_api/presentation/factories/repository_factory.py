import random

from fastapi import Depends

from stock_api.domain.repositories.market_data_client import MarketDataClient
from stock_api.domain.repositories.stock_repository import StockRepository
from stock_api.infra.clients.polygon_client import PolygonClient
from stock_api.infra.repositories.stock_file_repository import StockFileRepository
from stock_api.utils.settings import Settings, get_settings

_random_source = random.Random()


def build_stock_repository(settings: Settings = Depends(get_settings)) -> StockRepository:
    """Factory function to create a StockRepository over the configured data folder."""
    return StockFileRepository(settings.stock_data_folder)


def build_market_data_client(settings: Settings = Depends(get_settings)) -> MarketDataClient:
    return PolygonClient(
        api_key=settings.polygon_api_key,
        base_url=settings.polygon_base_url,
        timeout=settings.polygon_timeout
    )


def build_random_source() -> random.Random:
    """Shared process-wide random source; override in tests for determinism."""
    return _random_source
