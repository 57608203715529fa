from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from stock_api.domain.errors import StockApiError
from stock_api.presentation.middlewares.error_handlers import (
    request_validation_error_handler,
    stock_api_error_handler,
)
from stock_api.presentation.middlewares.performance_middleware import PerformanceMiddleware
from stock_api.presentation.routes import health, polygon, stocks
from stock_api.utils.settings import get_settings


settings = get_settings()

app = FastAPI(
    title='Stock Data API',
    version='1.0.0',
    description='API de dados OHLCV de ações a partir de arquivos locais ou do provedor Polygon.io.'
)

app.add_middleware(PerformanceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials='*' not in settings.allowed_origins,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(health.router, prefix='/api/health', tags=['Health'])
app.include_router(stocks.router, prefix='/api/stocks', tags=['Stocks'])
app.include_router(polygon.router, prefix='/api/polygon', tags=['Polygon'])

app.add_exception_handler(StockApiError, stock_api_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)


@app.get('/')
def root():
    return {
        'message': 'Stock Data API',
        'docs': '/docs',
        'endpoints': {
            'health': '/api/health',
            'stocks': '/api/stocks',
            'stocks_random': '/api/stocks/random',
            'polygon_stocks': '/api/polygon/stocks'
        }
    }
