from stock_api.domain.repositories.stock_repository import StockRepository


class GetHealthStatusUseCase:
    """Use case for checking application health status."""

    def __init__(self, stock_repository: StockRepository, data_folder: str):
        self.repository = stock_repository
        self.data_folder = data_folder

    def execute(self):
        """Report whether the stock data folder is readable."""
        try:
            folder_found = self.repository.folder_exists()
            symbol_files = len(self.repository.list_symbol_files())
        except OSError as e:
            return {
                'status': 'unhealthy',
                'message': f'Erro ao verificar dados: {str(e)}',
                'data': {
                    'data_folder': self.data_folder,
                    'folder_found': False,
                    'symbol_files': 0
                }
            }

        healthy = folder_found and symbol_files > 0
        return {
            'status': 'healthy' if healthy else 'unhealthy',
            'message': 'API funcionando corretamente' if healthy else 'Nenhum arquivo de dados encontrado',
            'data': {
                'data_folder': self.data_folder,
                'folder_found': folder_found,
                'symbol_files': symbol_files
            }
        }
