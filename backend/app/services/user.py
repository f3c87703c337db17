"""
Service para lógica de negócio de User.
"""

from app.core.filters import FieldType
from app.models.user import User
from app.repositories.lookup import GenderRepository
from app.repositories.user import UserRepository
from app.services.base import CrudService


class UserService(CrudService[User]):
    """Service para operações de User (email único)."""

    entity_name = "user"
    repository_class = UserRepository
    field_types = {
        "name": FieldType.STRING,
        "last_name": FieldType.STRING,
        "email": FieldType.STRING,
        "gender": FieldType.IDENTIFIER,
    }
    unique_fields = ("email",)
    references = {"gender_id": ("gender", GenderRepository)}
