"""
Lenient parser for symbol data files.

Each data line is comma separated with at least 10 fields:
    <TICKER>,<PER>,<DATE>,<TIME>,<OPEN>,<HIGH>,<LOW>,<CLOSE>,<VOL>,<OPENINT>
The first line of a file is always a header. Lines that are short or carry an
unparseable date or price are dropped instead of failing the whole file.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from stock_api.domain.models.stock import StockDataPoint

MIN_FIELDS = 10
DATE_FIELD = 2
PRICE_FIELDS = slice(4, 9)

_DATE_PATTERN = re.compile(r'[0-9]{8}')
_DECIMAL_PATTERN = re.compile(r'\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)\s*')


def parse_date(raw: str) -> Optional[date]:
    """Parse an exact 8-digit yyyyMMdd string."""
    if raw is None or not _DATE_PATTERN.fullmatch(raw):
        return None
    try:
        return datetime.strptime(raw, '%Y%m%d').date()
    except ValueError:
        return None


def parse_decimal(raw: str) -> Optional[Decimal]:
    """Parse a plain signed decimal; exponents, underscores and NaN/Infinity are rejected."""
    if raw is None or not _DECIMAL_PATTERN.fullmatch(raw):
        return None
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return None


def parse_line(raw: str) -> Optional[StockDataPoint]:
    """Turn one data line into a StockDataPoint, or None if it is not usable."""
    parts = raw.split(',')
    if len(parts) < MIN_FIELDS:
        return None

    line_date = parse_date(parts[DATE_FIELD])
    if line_date is None:
        return None

    prices = [parse_decimal(value) for value in parts[PRICE_FIELDS]]
    if any(value is None for value in prices):
        return None

    open_, high, low, close, volume = prices
    return StockDataPoint(time=line_date, open=open_, high=high, low=low, close=close, volume=volume)


def parse_line_date(raw: str) -> Optional[date]:
    """Read only the date field of a line; needs 3 fields instead of 10."""
    parts = raw.split(',')
    if len(parts) <= DATE_FIELD:
        return None
    return parse_date(parts[DATE_FIELD])


def data_lines(lines: Iterable[str]) -> List[str]:
    """Drop the header line and blank lines."""
    return [line for line in list(lines)[1:] if line.strip()]


def filter_lines(lines: Iterable[str], start: date, end: date) -> List[StockDataPoint]:
    """Parse a file's lines, keeping points with start <= date <= end in file order."""
    points = []
    for line in data_lines(lines):
        point = parse_line(line)
        if point is not None and start <= point.time <= end:
            points.append(point)
    return points
