import random

from fastapi import APIRouter, Depends, HTTPException, Query

from stock_api.domain.errors import StockApiError
from stock_api.domain.models.stock import RandomStockQuery, StockDataResponse, StockQuery
from stock_api.domain.repositories.stock_repository import StockRepository
from stock_api.domain.usecases.stocks.get_random_stock_data import GetRandomStockDataUseCase
from stock_api.domain.usecases.stocks.get_stock_data import GetStockDataUseCase
from stock_api.presentation.routes.router import DefaultRouter
from stock_api.presentation.factories.repository_factory import build_random_source, build_stock_repository
from stock_api.utils.logger import logger

router = APIRouter(route_class=DefaultRouter)

_stock_defaults = StockQuery()
_random_defaults = RandomStockQuery()


@router.get('',
            summary='Retorna os dados OHLCV de uma ação em um intervalo de datas',
            response_model=StockDataResponse)
def get_stocks(
    symbol: str = Query(_stock_defaults.symbol, description='Símbolo da ação (ex: aapl)'),
    start_date: str = Query(_stock_defaults.start_date, alias='startDate', description='Data inicial (yyyyMMdd)'),
    end_date: str = Query(_stock_defaults.end_date, alias='endDate', description='Data final (yyyyMMdd)'),
    repository: StockRepository = Depends(build_stock_repository)
):
    """
    Lê o arquivo `<symbol>.us.txt` da pasta de dados e retorna os registros
    com data entre startDate e endDate (ambos inclusivos), na ordem do arquivo.
    """
    query = StockQuery(symbol=symbol, start_date=start_date, end_date=end_date)
    try:
        use_case = GetStockDataUseCase(repository)
        return use_case.execute(query.symbol, query.start_date, query.end_date)
    except StockApiError:
        raise
    except Exception as e:
        logger.error(f'Erro ao ler dados de {symbol}: {str(e)}')
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get('/random',
            summary='Retorna uma janela aleatória de dados de uma ação aleatória',
            response_model=StockDataResponse)
def get_random_stock(
    months: int = Query(_random_defaults.months, ge=1, description='Tamanho da janela em meses'),
    repository: StockRepository = Depends(build_stock_repository),
    rng: random.Random = Depends(build_random_source)
):
    """Sorteia um arquivo da pasta de dados e uma data inicial que comporte `months` meses de dados."""
    query = RandomStockQuery(months=months)
    try:
        use_case = GetRandomStockDataUseCase(repository, rng)
        return use_case.execute(months=query.months)
    except StockApiError:
        raise
    except Exception as e:
        logger.error(f'Erro na amostra aleatória: {str(e)}')
        raise HTTPException(status_code=500, detail=str(e)) from e
