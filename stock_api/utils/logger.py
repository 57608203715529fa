import datetime
import json
import os
import threading
from typing import Any, Dict, Optional

from stock_api.utils.settings import Settings, get_settings


class Logger:
    """Console logger that also appends JSON lines to a file when running locally."""

    def __init__(self, settings: Settings):
        self.lock = threading.Lock()
        self.is_local = settings.is_local
        self.log_file = os.path.join(settings.log_dir, 'api.log')
        self.file_logging_enabled = False

        if self.is_local:
            self._setup_file_logging()

    def _setup_file_logging(self):
        """Create the log directory for local development."""
        try:
            os.makedirs(os.path.dirname(self.log_file), exist_ok=True)
            self.file_logging_enabled = True
        except OSError as e:
            print(f'File logging setup failed: {e}')

    def _store_in_file(self, log_entry: Dict[str, Any]):
        try:
            with self.lock, open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(log_entry, default=str) + '\n')
        except OSError as e:
            print(f'Failed to store log in file: {e}')

    def __log(self, level: str, message: str, data: Optional[Dict] = None):
        timestamp = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        print(f'[{timestamp}] [{level}] {message}')
        if data:
            print(f'Data: {json.dumps(data, indent=2, default=str)}')

        if self.file_logging_enabled:
            self._store_in_file({
                'timestamp': timestamp,
                'level': level,
                'message': message,
                'data': data
            })

    def debug(self, message: str, data: Optional[Dict] = None):
        self.__log('DEBUG', message, data)

    def info(self, message: str, data: Optional[Dict] = None):
        self.__log('INFO', message, data)

    def warning(self, message: str, data: Optional[Dict] = None):
        self.__log('WARNING', message, data)

    def error(self, message: str, data: Optional[Dict] = None):
        self.__log('ERROR', message, data)

    def critical(self, message: str, data: Optional[Dict] = None):
        self.__log('CRITICAL', message, data)

    def log_request_json(self, log_data: Dict[str, Any]):
        """Log an API call summary."""
        self.info(f'API_CALL: {json.dumps(log_data)}')

    def log_error_json(self, error_data: Dict[str, Any]):
        """Log an API error summary."""
        self.error(f'API_ERROR: {json.dumps(error_data)}', error_data)


logger = Logger(get_settings())
