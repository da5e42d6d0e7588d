"""
Exceções da aplicação.
"""


class CatalogError(Exception):
    """Erro base do catálogo."""


class ConnectionInitError(CatalogError):
    """Não foi possível abrir a conexão ou criar o schema do banco."""


class TransactionError(CatalogError):
    """
    Falha dentro de uma operação transacional.

    A transação já foi desfeita (rollback) quando esta exceção é levantada.
    A exceção original fica disponível em ``__cause__``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
