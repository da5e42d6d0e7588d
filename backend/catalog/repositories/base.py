"""
Repository base com operações CRUD genéricas.

Os repositories não fazem commit: a fronteira transacional fica nos
services (ver catalog.db.session.transaction).
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalog.db.session import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Fornece métodos genéricos para:
    - get_by_id: Buscar por ID
    - get_all: Listar todos
    - create: Criar registro
    - add: Persistir instância já construída
    - delete: Remover registro
    - count: Contar registros
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, id: int) -> ModelType | None:
        """Busca registro por ID."""
        return self.db.get(self.model, id)

    def get_all(self) -> list[ModelType]:
        """Lista todos os registros por ordem de ID."""
        result = self.db.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    def create(self, **kwargs: Any) -> ModelType:
        """Cria novo registro (flush para obter o ID gerado)."""
        return self.add(self.model(**kwargs))

    def add(self, instance: ModelType) -> ModelType:
        """Adiciona a instância à sessão e faz flush."""
        self.db.add(instance)
        self.db.flush()
        return instance

    def delete(self, instance: ModelType) -> None:
        """Remove registro."""
        self.db.delete(instance)
        self.db.flush()

    def count(self) -> int:
        """Conta total de registros."""
        result = self.db.execute(
            select(func.count(self.model.id))
        )
        return result.scalar_one()
