"""
Repository para operações de User no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository para operações CRUD de User."""

    load_options = (selectinload(User.gender),)

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)
