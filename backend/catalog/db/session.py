"""
Configuração de engine e sessão do banco de dados com SQLAlchemy.

Este módulo fornece a criação do engine, a session factory e o helper
de transação usado pelos services. Não há sessão global: quem abre o
engine e a sessão é responsável por repassá-los explicitamente.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.core.config import Settings, get_settings
from catalog.core.exceptions import ConnectionInitError, TransactionError
from catalog.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Classe base para todos os modelos SQLAlchemy."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cria o engine SQLAlchemy para a URL informada.

    SQLite em memória usa StaticPool para que todas as sessões enxerguem
    o mesmo banco (uma única conexão).
    """
    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Factory de sessões ligada ao engine informado."""
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


def check_database_connection(engine: Engine) -> tuple[bool, str | None]:
    """
    Verifica se a conexão com o banco de dados está funcionando.

    Returns:
        Tupla (sucesso, mensagem_erro)
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True, None
    except Exception as e:
        return False, str(e)


def init_database(settings: Settings | None = None) -> Engine:
    """
    Abre o engine, verifica a conexão e cria as tabelas que faltam.

    Raises:
        ConnectionInitError: Banco inacessível ou falha ao criar o schema
    """
    # Registra os models no metadata antes do create_all
    import catalog.models  # noqa: F401

    settings = settings or get_settings()

    try:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise ConnectionInitError(f"URL de banco inválida: {e}") from e

    success, error = check_database_connection(engine)
    if not success:
        engine.dispose()
        raise ConnectionInitError(f"Banco de dados indisponível: {error}")

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        engine.dispose()
        raise ConnectionInitError(f"Falha ao criar schema: {e}") from e

    logger.info(f"Conexão com o banco estabelecida ({engine.dialect.name})")
    return engine


@contextmanager
def transaction(session: Session, operation: str) -> Iterator[Session]:
    """
    Fronteira transacional: commit ao final, rollback em qualquer erro.

    Uso nos services:
        with transaction(self.db, "create_author"):
            ...

    Raises:
        TransactionError: Qualquer exceção dentro do bloco, após o rollback
    """
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Transação '{operation}' desfeita: {e}")
        raise TransactionError(operation, str(e)) from e
