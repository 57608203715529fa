from datetime import date

from stock_api.domain.errors import InternalFailureError, InvalidRequestError, NotFoundError
from stock_api.domain.models.stock import StockDataResponse
from stock_api.domain.repositories.stock_repository import StockRepository
from stock_api.infra.parsers.stock_file_parser import filter_lines, parse_date
from stock_api.utils.logger import logger


class GetStockDataUseCase:
    """Use case for reading a symbol's data within an inclusive date range."""

    def __init__(self, stock_repository: StockRepository):
        self.repository = stock_repository

    def execute(self, symbol: str, start_date: str, end_date: str) -> StockDataResponse:
        """Execute the use case; dates are yyyyMMdd strings."""
        if not symbol or not start_date or not end_date:
            raise InvalidRequestError('symbol, startDate, and endDate are required')

        file_path = self.repository.resolve_symbol_file(symbol)
        if file_path is None:
            raise NotFoundError(f'Stock data file not found for symbol: {symbol}')

        start = self._parse_request_date(start_date)
        end = self._parse_request_date(end_date)

        data = filter_lines(self.repository.read_lines(file_path), start, end)
        logger.info(f'{symbol}: {len(data)} registros entre {start} e {end}')

        if not data:
            raise NotFoundError('No data found for the specified criteria')

        return StockDataResponse.build(symbol, start, end, data)

    @staticmethod
    def _parse_request_date(value: str) -> date:
        parsed = parse_date(value)
        if parsed is None:
            raise InternalFailureError(f"String '{value}' was not recognized as a valid date in format yyyyMMdd.")
        return parsed
