from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from stock_api.domain.errors import StockApiError
from stock_api.domain.models.stock import PolygonQuery, StockDataResponse
from stock_api.domain.repositories.market_data_client import MarketDataClient
from stock_api.domain.usecases.stocks.get_polygon_stock_data import GetPolygonStockDataUseCase
from stock_api.presentation.routes.router import DefaultRouter
from stock_api.presentation.factories.repository_factory import build_market_data_client
from stock_api.utils.logger import logger

router = APIRouter(route_class=DefaultRouter)

_defaults = PolygonQuery()


@router.get('/stocks',
            summary='Retorna dados OHLCV do provedor Polygon.io',
            response_model=StockDataResponse)
def get_polygon_stocks(
    symbol: str = Query(_defaults.symbol, description='Símbolo da ação (ex: AAPL)'),
    interval: Optional[str] = Query(_defaults.interval, description='1day, 1week ou 1month'),
    from_date: str = Query(_defaults.from_date, alias='from', description='Data inicial (YYYY-MM-DD)'),
    to_date: str = Query(_defaults.to_date, alias='to', description='Data final (YYYY-MM-DD)'),
    client: MarketDataClient = Depends(build_market_data_client)
):
    """
    Consulta os agregados do provedor e converte para o formato de resposta da API.
    Intervalos desconhecidos são tratados como diários; startDate/endDate refletem
    as datas efetivamente recebidas.
    """
    query = PolygonQuery(symbol=symbol, interval=interval, from_date=from_date, to_date=to_date)
    try:
        use_case = GetPolygonStockDataUseCase(client)
        return use_case.execute(query.symbol, query.interval, query.from_date, query.to_date)
    except StockApiError:
        raise
    except Exception as e:
        logger.error(f'Erro ao consultar o provedor para {symbol}: {str(e)}')
        raise HTTPException(status_code=500, detail=str(e)) from e
