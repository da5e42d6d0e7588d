"""
Módulo de banco de dados - engine, sessões e transações.

Exports:
    - Base: Classe base para modelos SQLAlchemy
    - create_db_engine: Cria o engine para uma URL
    - create_session_factory: Factory de sessões
    - init_database: Abre o engine e cria o schema
    - transaction: Fronteira transacional dos services
"""

from catalog.db.session import (
    Base,
    check_database_connection,
    create_db_engine,
    create_session_factory,
    init_database,
    transaction,
)

__all__ = [
    "Base",
    "check_database_connection",
    "create_db_engine",
    "create_session_factory",
    "init_database",
    "transaction",
]
