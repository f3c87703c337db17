"""
Repository para operações de Author no banco de dados.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.author import Author
from app.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository para operações CRUD de Author (com gênero carregado)."""

    load_options = (selectinload(Author.gender),)

    def __init__(self, db: AsyncSession):
        super().__init__(Author, db)

    def _default_order(self):
        return (Author.last_name.asc(), Author.name.asc(), Author.id.asc())

    async def find_by_ids(self, ids: list) -> list[Author]:
        """Busca vários autores de uma vez (ids ausentes são ignorados)."""
        if not ids:
            return []
        result = await self.db.execute(select(Author).where(Author.id.in_(ids)))
        return list(result.scalars().all())
