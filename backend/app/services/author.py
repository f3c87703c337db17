"""
Service para lógica de negócio de Author.
"""

from app.core.filters import FieldType
from app.models.author import Author
from app.repositories.author import AuthorRepository
from app.repositories.lookup import GenderRepository
from app.services.base import CrudService


class AuthorService(CrudService[Author]):
    """
    Service para operações de Author.

    Um autor é considerado duplicado quando nome E sobrenome casam com os
    de outro autor.
    """

    entity_name = "author"
    repository_class = AuthorRepository
    field_types = {
        "name": FieldType.STRING,
        "last_name": FieldType.STRING,
        "birthdate": FieldType.DATE,
        "gender": FieldType.IDENTIFIER,
    }
    unique_fields = ("name", "last_name")
    references = {"gender_id": ("gender", GenderRepository)}
