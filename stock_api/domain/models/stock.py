from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modelo base serializado em camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockDataPoint(CamelModel):
    """Dados OHLCV de uma ação em uma data específica."""
    time: date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal


class StockDataResponse(CamelModel):
    """Série de dados OHLCV de uma ação em um intervalo de datas."""
    symbol: str
    start_date: str
    end_date: str
    data_points: int
    data: List[StockDataPoint]

    @classmethod
    def build(cls, symbol: str, start: date, end: date, data: List[StockDataPoint]) -> 'StockDataResponse':
        return cls(
            symbol=normalize_symbol(symbol),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            data_points=len(data),
            data=data
        )


class StockQuery(BaseModel):
    """Parâmetros da consulta de dados locais."""
    symbol: str = Field(default='aapl', description='Símbolo da ação')
    start_date: str = Field(default='20200213', description='Data inicial no formato yyyyMMdd')
    end_date: str = Field(default='20200221', description='Data final no formato yyyyMMdd')


class PolygonQuery(BaseModel):
    """Parâmetros da consulta ao provedor externo."""
    symbol: str = Field(default='AAPL', description='Símbolo da ação')
    interval: Optional[str] = Field(default='1day', description='Intervalo: 1day, 1week ou 1month')
    from_date: str = Field(default='2025-01-01', description='Data inicial no formato YYYY-MM-DD')
    to_date: str = Field(default='2025-01-31', description='Data final no formato YYYY-MM-DD')


class RandomStockQuery(BaseModel):
    """Parâmetros da amostra aleatória."""
    months: int = Field(default=6, ge=1, description='Tamanho da janela em meses')


def normalize_symbol(symbol: str) -> str:
    return symbol.upper().replace('.US', '')
