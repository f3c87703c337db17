"""
Service para lógica de negócio de Book.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ObjectMissingParameters, ObjectNotFound
from app.core.filters import FieldType
from app.core.logging import get_logger
from app.models.author import Author
from app.models.book import Book
from app.repositories.author import AuthorRepository
from app.repositories.book import BookRepository
from app.repositories.lookup import BookStatusRepository, EditorialRepository
from app.schemas.book import BookCreate, BookUpdate
from app.services.base import CrudService

logger = get_logger(__name__)


class BookService(CrudService[Book]):
    """
    Service para operações de Book.

    A classificação identifica o livro para fins de duplicidade; editora,
    status e todos os autores precisam existir.
    """

    entity_name = "book"
    repository_class = BookRepository
    field_types = {
        "title": FieldType.STRING,
        "isbn": FieldType.STRING,
        "classification": FieldType.STRING,
        "summary": FieldType.STRING,
        "editorial": FieldType.IDENTIFIER,
        "language": FieldType.STRING,
        "edition": FieldType.STRING,
        "sample": FieldType.STRING,
        "location": FieldType.STRING,
        "book_status": FieldType.IDENTIFIER,
    }
    unique_fields = ("classification",)
    references = {
        "editorial_id": ("editorial", EditorialRepository),
        "book_status_id": ("book_status", BookStatusRepository),
    }

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.author_repo = AuthorRepository(db)

    async def _resolve_authors(self, ids: list[UUID]) -> list[Author]:
        """
        Raises:
            ObjectNotFound: algum autor não existe
        """
        unique_ids = set(ids)
        authors = await self.author_repo.find_by_ids(list(unique_ids))
        if len(authors) != len(unique_ids):
            raise ObjectNotFound("author")
        return authors

    async def create(self, data: BookCreate) -> Book:
        """
        Cria livro após verificar referências, autores e duplicidade.

        Raises:
            ObjectNotFound: editora, status ou autor inexistente
            ObjectAlreadyExists: classificação já cadastrada
        """
        values: dict[str, Any] = data.model_dump()
        author_ids = values.pop("authors")
        await self._check_references(values)
        await self._check_duplicate(values)
        authors = await self._resolve_authors(author_ids)

        book = await self.repo.create(**values, authors=authors)
        logger.info(f"Livro criado: {book.id} classificação={book.classification}")
        return book

    async def update(self, id: UUID | None, data: BookUpdate) -> Book:
        """
        Atualiza livro; `authors`, quando informado, substitui a lista inteira.

        Raises:
            ObjectMissingParameters: id ou campos não informados
            ObjectNotFound: livro, referência ou autor inexistente
            ObjectAlreadyExists: classificação de outro livro
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        changes = self._changes(data)
        if not changes:
            raise ObjectMissingParameters(self.entity_name)
        book = await self.get_by_id(id)

        author_ids = changes.pop("authors", None)
        merged = self._merge(book, changes, self.unique_fields)
        await self._check_references(changes)
        await self._check_duplicate(merged, exclude_id=book.id)
        if author_ids is not None:
            changes["authors"] = await self._resolve_authors(author_ids)

        updated = await self.repo.update(book, **changes)
        logger.info(f"Livro atualizado: {id}")
        return updated
