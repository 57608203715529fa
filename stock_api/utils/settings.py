from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_ignore_empty=True,
        case_sensitive=False,
        extra='ignore',
    )

    stock_data_folder: str = Field(default='./data/stockdata', description='Folder with <symbol>.us.txt files')
    polygon_api_key: str = Field(default='demo', description='Polygon.io API key')
    polygon_base_url: str = 'https://api.polygon.io'
    polygon_timeout: float = Field(default=10.0, gt=0, description='Outbound request timeout in seconds')
    env: str = Field(default='DEVELOPMENT', description='LOCAL, DEVELOPMENT or PRODUCTION')
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ['*'],
        description='Allowed CORS origins outside development (comma separated)',
    )
    log_dir: str = 'logs'

    @field_validator('env')
    @classmethod
    def normalize_env(cls, v: str) -> str:
        return v.upper()

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    @property
    def is_local(self) -> bool:
        return self.env == 'LOCAL'

    @property
    def allowed_origins(self) -> List[str]:
        if self.env in ('LOCAL', 'DEVELOPMENT'):
            return ['*']
        return self.cors_origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
