import os
import random
from datetime import date

import pandas as pd

from stock_api.domain.errors import NotFoundError
from stock_api.domain.models.stock import StockDataResponse
from stock_api.domain.repositories.stock_repository import StockRepository
from stock_api.infra.parsers.stock_file_parser import data_lines, filter_lines, parse_line_date
from stock_api.utils.logger import logger


def add_months(value: date, months: int) -> date:
    """Calendar-month arithmetic, clamped to the end of the target month."""
    return (pd.Timestamp(value) + pd.DateOffset(months=months)).date()


class GetRandomStockDataUseCase:
    """Use case for sampling a random symbol and a random window of N months."""

    def __init__(self, stock_repository: StockRepository, rng: random.Random):
        self.repository = stock_repository
        self.rng = rng

    def execute(self, months: int = 6) -> StockDataResponse:
        if not self.repository.folder_exists():
            raise NotFoundError('Stock data folder not found')

        files = self.repository.list_symbol_files()
        if not files:
            raise NotFoundError('No stock data files found')

        file_path = self.rng.choice(files)
        file_name = os.path.splitext(os.path.basename(file_path))[0]
        symbol = file_name.upper()

        lines = self.repository.read_lines(file_path)
        if not data_lines(lines):
            raise NotFoundError(f'No data found in file: {file_name}')

        available_dates = sorted(
            d for d in (parse_line_date(line) for line in data_lines(lines)) if d is not None
        )
        if not available_dates:
            raise NotFoundError(f'No valid dates found in file: {file_name}')

        start, end = self.pick_window(available_dates, months)
        logger.info(f'Amostra aleatória: {symbol} de {start} até {end} ({months} meses)')

        return StockDataResponse.build(symbol, start, end, filter_lines(lines, start, end))

    def pick_window(self, available_dates: list, months: int) -> tuple:
        """Pick (start, end) from sorted dates so the window spans `months` where possible."""
        min_date = available_dates[0]
        max_date = available_dates[-1]

        latest_start = add_months(max_date, -months)
        if latest_start < min_date:
            latest_start = min_date

        valid_starts = [d for d in available_dates if d <= latest_start]

        if not valid_starts:
            limit = add_months(min_date, months)
            in_range = [d for d in available_dates if d <= limit]
            return min_date, in_range[-1] if in_range else max_date

        start = self.rng.choice(valid_starts)
        end = add_months(start, months)
        if end > max_date:
            end = max_date
        return start, end
