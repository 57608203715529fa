from typing import Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute

from stock_api.utils.logger import logger


class DefaultRouter(APIRoute):
    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def custom_route_handler(request: Request) -> Response:
            query = request.query_params
            if query:
                logger.info(f'Received Query: {request.url.path} {query}')
            try:
                response: Response = await original_route_handler(request)
            except Exception as error:
                logger.error(f'Error: {type(error).__name__}: {error}')
                raise
            logger.info(f'Response Status: {request.url.path} {response.status_code}')
            return response

        return custom_route_handler
