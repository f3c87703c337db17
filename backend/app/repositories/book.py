"""
Repository para operações de Book no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.book import Book
from app.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository para operações CRUD de Book (editora, status e autores)."""

    load_options = (
        selectinload(Book.editorial),
        selectinload(Book.book_status),
        selectinload(Book.authors),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(Book, db)

    def _default_order(self):
        return (Book.title.asc(), Book.id.asc())
