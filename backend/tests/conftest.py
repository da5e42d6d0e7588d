"""
Fixtures compartilhadas para testes.

Cada teste recebe um banco SQLite em memória próprio (engine + sessão
independentes), sem estado global compartilhado.
"""

import logging
from typing import Generator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import catalog.models  # noqa: F401
from catalog.core.config import get_settings
from catalog.db.session import Base, create_db_engine, create_session_factory
from catalog.services.author import AuthorService
from catalog.services.book import BookService
from catalog.services.category import CategoryService


# ==========================================
# Database fixtures
# ==========================================

@pytest.fixture
def test_engine() -> Generator[Engine, None, None]:
    """Engine SQLite em memória com o schema criado."""
    engine = create_db_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_db(test_engine) -> Generator[Session, None, None]:
    """Sessão de banco independente para o teste."""
    session_factory = create_session_factory(test_engine)
    with session_factory() as session:
        yield session


# ==========================================
# Service fixtures
# ==========================================

@pytest.fixture
def author_service(test_db) -> AuthorService:
    return AuthorService(test_db)


@pytest.fixture
def category_service(test_db) -> CategoryService:
    return CategoryService(test_db)


@pytest.fixture
def book_service(test_db) -> BookService:
    return BookService(test_db)


@pytest.fixture
def orwell(author_service):
    """Autor de exemplo."""
    return author_service.create_author("George Orwell", "United Kingdom")


# ==========================================
# Settings / logging fixtures
# ==========================================

@pytest.fixture
def settings_env(monkeypatch):
    """
    Permite sobrescrever variáveis de ambiente das configurações.

    Limpa o cache de get_settings antes e depois do teste.
    """
    get_settings.cache_clear()

    def _set(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Remove os handlers criados por setup_logging durante o teste."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
