from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from stock_api.domain.errors import StockApiError


async def stock_api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, StockApiError):
        return JSONResponse(
            status_code=exc.status_code,
            content={'detail': exc.message}
        )
    return JSONResponse(
        status_code=500,
        content={'detail': 'Internal server error'}
    )


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report invalid query parameters by name, e.g. a non-integer or zero `months`."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=500, content={'detail': 'Internal server error'})

    errors = [
        {
            'param': str(err['loc'][-1]) if err['loc'] else None,
            'location': err['loc'][0] if err['loc'] else None,
            'msg': err['msg'],
            'type': err['type']
        } for err in exc.errors()
    ]
    params = ', '.join(e['param'] for e in errors if e['param'])
    return JSONResponse(
        status_code=422,
        content={'detail': f'Parâmetros inválidos: {params}', 'errors': errors}
    )
