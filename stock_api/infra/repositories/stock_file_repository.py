import os
from typing import List, Optional

from stock_api.domain.repositories.stock_repository import StockRepository

FILE_SUFFIX = '.us.txt'


class StockFileRepository(StockRepository):
    """Repository reading one `<symbol>.us.txt` file per symbol from a folder."""

    def __init__(self, data_folder: str):
        self.data_folder = data_folder

    def resolve_symbol_file(self, symbol: str) -> Optional[str]:
        file_path = os.path.join(self.data_folder, f'{symbol.lower()}{FILE_SUFFIX}')
        if not os.path.isfile(file_path):
            return None
        return file_path

    def folder_exists(self) -> bool:
        return os.path.isdir(self.data_folder)

    def list_symbol_files(self) -> List[str]:
        """List the `*.txt` files of the data folder."""
        if not self.folder_exists():
            return []
        return sorted(
            os.path.join(self.data_folder, name)
            for name in os.listdir(self.data_folder)
            if name.endswith('.txt') and os.path.isfile(os.path.join(self.data_folder, name))
        )

    def read_lines(self, file_path: str) -> List[str]:
        with open(file_path, encoding='utf-8', errors='replace') as f:
            return f.read().splitlines()
