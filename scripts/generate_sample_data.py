"""
Generate sample symbol data files for local development.
This creates random-walk OHLCV data so the API can work without a downloaded data set.

Run from the project root:
    python scripts/generate_sample_data.py [SYMBOL ...]
"""

import os
import sys
from datetime import datetime, timedelta

import numpy as np

# Paths
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.getenv('STOCK_DATA_FOLDER') or os.path.join(os.path.dirname(SCRIPT_DIR), 'data', 'stockdata')

HEADER = '<TICKER>,<PER>,<DATE>,<TIME>,<OPEN>,<HIGH>,<LOW>,<CLOSE>,<VOL>,<OPENINT>'
DEFAULT_SYMBOLS = ['aapl', 'msft', 'googl']


def business_days(start_date, end_date):
    dates = []
    current = start_date
    while current <= end_date:
        if current.weekday() < 5:  # Skip weekends
            dates.append(current)
        current += timedelta(days=1)
    return dates


def generate_symbol_file(symbol, dates, seed):
    """Write `<symbol>.us.txt` with one random-walk bar per business day."""
    rng = np.random.default_rng(seed)
    n = len(dates)

    base_price = rng.uniform(20.0, 300.0)
    returns = rng.normal(0.0003, 0.018, n)
    closes = base_price * np.cumprod(1 + returns)

    ticker = f'{symbol.upper()}.US'
    file_path = os.path.join(DATA_DIR, f'{symbol.lower()}.us.txt')

    with open(file_path, 'w') as f:
        f.write(HEADER + '\n')
        for i, date in enumerate(dates):
            close = round(float(closes[i]), 4)
            daily_range = abs(rng.normal(0, 0.015)) * close
            high = round(close + daily_range * rng.uniform(0.3, 1.0), 4)
            low = round(close - daily_range * rng.uniform(0.3, 1.0), 4)
            open_price = round(low + (high - low) * rng.uniform(0.2, 0.8), 4)
            volume = int(rng.uniform(5_000_000, 50_000_000))
            f.write(f"{ticker},D,{date.strftime('%Y%m%d')},000000,{open_price},{high},{low},{close},{volume},0\n")

    print(f'  {n} registros salvos em {file_path}')


def main():
    symbols = sys.argv[1:] or DEFAULT_SYMBOLS

    os.makedirs(DATA_DIR, exist_ok=True)

    dates = business_days(datetime(2018, 1, 2), datetime(2025, 6, 30))
    for i, symbol in enumerate(symbols):
        generate_symbol_file(symbol, dates, seed=42 + i)

    print('Dados de amostra gerados com sucesso!')


if __name__ == '__main__':
    main()
