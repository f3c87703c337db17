"""
Service base com o CRUD genérico das entidades.

Cada subclasse declara:
    - entity_name: nome usado nas mensagens de erro ("room_location")
    - repository_class: repository da entidade
    - field_types: allow-list de campos filtráveis e seus tipos
    - unique_fields: campos comparados na verificação de duplicidade
    - references: campo FK -> (entidade, repository) verificados antes de gravar
"""

from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import (
    ObjectAlreadyExists,
    ObjectMissingParameters,
    ObjectNotFound,
)
from app.core.filters import FieldType, build_filter, parse_pagination
from app.core.logging import get_logger
from app.repositories.base import BaseRepository

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")


class CrudService(Generic[ModelType]):
    """Operações create/list/filter/get/update/delete com as validações comuns."""

    entity_name: ClassVar[str]
    repository_class: ClassVar[type[BaseRepository]]
    field_types: ClassVar[dict[str, FieldType]] = {}
    unique_fields: ClassVar[tuple[str, ...]] = ()
    references: ClassVar[dict[str, tuple[str, type[BaseRepository]]]] = {}

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = self.repository_class(db)
        self.reference_repos = {
            field: (entity, repo_class(db))
            for field, (entity, repo_class) in self.references.items()
        }

    # ------------------------------------------------------------------
    # Validações
    # ------------------------------------------------------------------

    async def _check_references(self, values: dict[str, Any]) -> None:
        """
        Raises:
            ObjectNotFound: entidade referenciada não existe
        """
        for field, (entity, repo) in self.reference_repos.items():
            value = values.get(field)
            if value is None:
                continue
            if await repo.find_by_id(value) is None:
                raise ObjectNotFound(entity)

    async def _check_duplicate(
        self,
        values: dict[str, Any],
        exclude_id: UUID | None = None,
    ) -> None:
        """
        Rejeita registro cujos campos únicos casam (parcialmente, sem
        diferenciar maiúsculas) com algum registro existente.

        Raises:
            ObjectAlreadyExists: já existe registro equivalente
        """
        if not self.unique_fields:
            return
        patterns = {field: values.get(field) for field in self.unique_fields}
        if any(not value for value in patterns.values()):
            return
        matches = await self.repo.find_matching(**{k: str(v) for k, v in patterns.items()})
        if any(match.id != exclude_id for match in matches):
            raise ObjectAlreadyExists(self.entity_name)

    @staticmethod
    def _changes(data: BaseModel) -> dict[str, Any]:
        return data.model_dump(exclude_unset=True, exclude_none=True)

    @staticmethod
    def _merge(instance: ModelType, changes: dict[str, Any], fields) -> dict[str, Any]:
        """Valores resultantes da atualização: existentes sobrescritos por `changes`."""
        return {
            field: changes[field] if field in changes else getattr(instance, field)
            for field in set(fields) | set(changes)
        }

    # ------------------------------------------------------------------
    # Listagem
    # ------------------------------------------------------------------

    async def _paginate(
        self,
        clause: ColumnElement[bool] | None,
        page: Any,
        limit: Any,
    ) -> dict[str, Any]:
        pagination = parse_pagination(page, limit, self.entity_name)
        total = await self.repo.count(clause)
        items = await self.repo.filter(clause, pagination.offset(total), pagination.limit)
        return {"data": items, "pagination": pagination.metadata(total)}

    async def list(self, page: Any = 1, limit: Any = 10) -> dict[str, Any]:
        """
        Lista registros paginados.

        Returns:
            {"data": [...], "pagination": {totalItems, totalPages, currentPage, pageSize}}

        Raises:
            ObjectInvalidQueryFilters: page/limit inválidos
        """
        return await self._paginate(None, page, limit)

    async def filter(
        self,
        field: str,
        value: str,
        page: Any = 1,
        limit: Any = 10,
    ) -> dict[str, Any]:
        """
        Lista registros com `field` igual (ou parecido, para textos) a `value`.

        Raises:
            ObjectInvalidQueryFilters: campo fora da allow-list, valor ou paginação inválidos
        """
        clause = build_filter(
            self.repo.model, self.field_types, field, value, self.entity_name
        )
        return await self._paginate(clause, page, limit)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def get_by_id(self, id: UUID | None) -> ModelType:
        """
        Raises:
            ObjectMissingParameters: id não informado
            ObjectNotFound: registro não existe
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        instance = await self.repo.find_by_id(id)
        if instance is None:
            raise ObjectNotFound(self.entity_name)
        return instance

    async def create(self, data: BaseModel) -> ModelType:
        """
        Cria registro após verificar referências e duplicidade.

        Raises:
            ObjectNotFound: referência inexistente
            ObjectAlreadyExists: registro duplicado
        """
        values = data.model_dump()
        await self._check_references(values)
        await self._check_duplicate(values)
        instance = await self.repo.create(**values)
        logger.info(f"{self.entity_name} criado: {instance.id}")
        return instance

    async def update(self, id: UUID | None, data: BaseModel) -> ModelType:
        """
        Atualiza os campos informados.

        Raises:
            ObjectMissingParameters: id ou campos não informados
            ObjectNotFound: registro ou referência inexistente
            ObjectAlreadyExists: valores resultantes duplicam outro registro
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        changes = self._changes(data)
        if not changes:
            raise ObjectMissingParameters(self.entity_name)
        instance = await self.get_by_id(id)

        merged = self._merge(instance, changes, self.unique_fields)
        await self._check_references(changes)
        await self._check_duplicate(merged, exclude_id=instance.id)

        updated = await self.repo.update(instance, **changes)
        logger.info(f"{self.entity_name} atualizado: {id}")
        return updated

    async def delete(self, id: UUID | None) -> None:
        """
        Raises:
            ObjectMissingParameters: id não informado
            ObjectNotFound: registro não existe
        """
        instance = await self.get_by_id(id)
        await self.repo.delete(instance)
        logger.info(f"{self.entity_name} removido: {id}")
