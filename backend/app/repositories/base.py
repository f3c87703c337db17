"""
Repository base com operações CRUD genéricas.
"""

from typing import Any, ClassVar, Generic, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from app.core.filters import contains_pattern
from app.db.session import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Fornece métodos genéricos para:
    - create: Criar registro
    - filter: Listar com cláusula (paginado)
    - count: Contar registros (opcionalmente filtrados)
    - find_by_id: Buscar por ID, com as referências carregadas
    - find_matching: Busca parcial case insensitive por um ou mais campos
    - lock_by_id: Buscar com SELECT ... FOR UPDATE
    - update: Atualizar registro
    - delete: Remover registro

    Subclasses declaram `load_options` para carregar as referências de forma
    explícita (selectinload); os relacionamentos dos models são `lazy="raise"`.
    """

    load_options: ClassVar[Sequence[LoaderOption]] = ()

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    def _select(self) -> Select:
        return select(self.model).options(*self.load_options)

    def _default_order(self) -> Sequence[Any]:
        return (self.model.created_at.asc(), self.model.id.asc())

    async def create(self, **kwargs: Any) -> ModelType:
        """Cria novo registro e o retorna com as referências carregadas."""
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.db.commit()
        return await self.find_by_id(instance.id)

    async def filter(
        self,
        clause: ColumnElement[bool] | None,
        skip: int = 0,
        limit: int | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> list[ModelType]:
        """Lista registros que satisfazem `clause`, com paginação."""
        query = self._select()
        if clause is not None:
            query = query.where(clause)
        query = query.order_by(*(order_by or self._default_order())).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self, clause: ColumnElement[bool] | None = None) -> int:
        """Conta registros, opcionalmente restritos a `clause`."""
        query = select(func.count(self.model.id))
        if clause is not None:
            query = query.where(clause)
        result = await self.db.execute(query)
        return result.scalar_one()

    async def find_by_id(self, id: UUID | None) -> ModelType | None:
        """Busca registro por ID, recarregando referências já em memória."""
        if id is None:
            return None
        result = await self.db.execute(
            self._select()
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_matching(self, **patterns: str) -> list[ModelType]:
        """
        Busca parcial case insensitive; todos os campos precisam casar.

        Usado nas verificações de duplicidade dos services.
        """
        clauses = [
            getattr(self.model, field).ilike(contains_pattern(value), escape="\\")
            for field, value in patterns.items()
        ]
        result = await self.db.execute(
            select(self.model).where(and_(*clauses)).limit(10)
        )
        return list(result.scalars().all())

    async def lock_by_id(self, id: UUID) -> ModelType | None:
        """
        Busca o registro bloqueando a linha até o próximo commit.

        Serializa verificações check-then-act concorrentes sobre o mesmo pai
        (sala de uma reserva, usuário de uma assinatura).
        """
        result = await self.db.execute(
            select(self.model).where(self.model.id == id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """Atualiza os campos informados (inclusive para None) e recarrega."""
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self.db.commit()
        return await self.find_by_id(instance.id)

    async def delete(self, instance: ModelType) -> None:
        """Remove registro."""
        await self.db.delete(instance)
        await self.db.commit()
