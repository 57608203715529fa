from abc import ABC, abstractmethod
from typing import List, Optional


class StockRepository(ABC):
    """Interface for the read-only stock data folder."""

    @abstractmethod
    def resolve_symbol_file(self, symbol: str) -> Optional[str]:
        """Return the data file path for a symbol, or None if it does not exist."""
        pass

    @abstractmethod
    def folder_exists(self) -> bool:
        pass

    @abstractmethod
    def list_symbol_files(self) -> List[str]:
        """List every symbol data file in the folder, sorted by name."""
        pass

    @abstractmethod
    def read_lines(self, file_path: str) -> List[str]:
        """Read all lines of a data file."""
        pass
