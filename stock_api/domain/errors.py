class StockApiError(Exception):
    """Base error carrying the HTTP status it should be reported with."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequestError(StockApiError):
    """A required parameter is missing or empty."""

    status_code = 400


class NotFoundError(StockApiError):
    """The data file does not exist or the filtered result is empty."""

    status_code = 404


class UpstreamFailureError(StockApiError):
    """The remote provider answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code=status_code)


class InternalFailureError(StockApiError):
    """Malformed input that cannot be processed, or an unexpected fault."""

    status_code = 500
