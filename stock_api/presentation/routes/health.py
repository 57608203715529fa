from fastapi import APIRouter, Depends

from stock_api.domain.repositories.stock_repository import StockRepository
from stock_api.domain.usecases.health.get_health_status import GetHealthStatusUseCase
from stock_api.presentation.routes.router import DefaultRouter
from stock_api.presentation.factories.repository_factory import build_stock_repository
from stock_api.utils.settings import Settings, get_settings

router = APIRouter(route_class=DefaultRouter)


@router.get('', summary='Verifica o status da API e a pasta de dados')
def health_check(
    repository: StockRepository = Depends(build_stock_repository),
    settings: Settings = Depends(get_settings)
):
    """Verifica o status de saúde da aplicação."""
    use_case = GetHealthStatusUseCase(repository, settings.stock_data_folder)
    return use_case.execute()
