"""
Configuração centralizada da aplicação via Pydantic Settings.

Carrega variáveis de ambiente do arquivo .env e valida tipos automaticamente.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações da aplicação carregadas de variáveis de ambiente.

    Attributes:
        APP_NAME: Nome da aplicação exibido nos logs
        ENVIRONMENT: Ambiente atual (development, test, production)
        DATABASE_URL: URL de conexão SQLAlchemy (sync)
        DATABASE_ECHO: Loga o SQL gerado pelo SQLAlchemy
        LOG_LEVEL: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Library Catalog"
    ENVIRONMENT: str = "development"

    # Database
    DATABASE_URL: str = "sqlite:///:memory:"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def is_in_memory(self) -> bool:
        """Verifica se o banco configurado é SQLite em memória."""
        return self.DATABASE_URL.startswith("sqlite") and ":memory:" in self.DATABASE_URL


@lru_cache
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.

    Usa lru_cache para evitar recarregar .env em cada chamada.
    """
    return Settings()
