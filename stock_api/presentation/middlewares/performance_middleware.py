import time
import uuid
from datetime import datetime

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from stock_api.utils.logger import logger


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Times every API call and tags the response with timing headers."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        request_id = str(uuid.uuid4())

        try:
            response = await call_next(request)
        except Exception as e:
            logger.log_error_json({
                'timestamp': datetime.now().isoformat(),
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
                'error_type': type(e).__name__,
                'error_message': str(e)
            })
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.log_request_json({
            'timestamp': datetime.now().isoformat(),
            'request_id': request_id,
            'method': request.method,
            'path': request.url.path,
            'status_code': response.status_code,
            'duration_ms': duration_ms
        })

        response.headers['X-Response-Time'] = f'{duration_ms}ms'
        response.headers['X-Request-ID'] = request_id
        return response
