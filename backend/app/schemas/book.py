"""
Schemas Pydantic para Book.
"""

from typing import List
from uuid import UUID

from pydantic import Field

from app.schemas.author import AuthorSummary
from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.editorial import EditorialRead
from app.schemas.statuses import BookStatusRead


class BookCreate(BaseSchema):
    """
    Schema para criação de livro.

    `authors` recebe os IDs dos autores; todos precisam existir.
    """
    title: str = Field(..., min_length=1, max_length=500, examples=["Dom Casmurro"])
    isbn: str = Field(..., min_length=1, max_length=20, examples=["978-8535910667"])
    classification: str = Field(..., min_length=1, max_length=100, examples=["869.3 A848d"])
    summary: str = Field(..., min_length=1)
    editorial_id: UUID
    language: str = Field(..., min_length=1, max_length=50, examples=["Português"])
    edition: str = Field(..., min_length=1, max_length=50, examples=["1ª"])
    sample: str = Field(..., min_length=1, max_length=50, examples=["EX-01"])
    location: str = Field(..., min_length=1, max_length=255, examples=["Estante 4B"])
    book_status_id: UUID
    genres: List[str] = Field(default_factory=list)
    authors: List[UUID] = Field(..., min_length=1)
    book_img: str | None = Field(None, max_length=500)


class BookRead(TimestampSchema):
    """Schema para leitura de livro."""
    id: UUID
    title: str
    isbn: str
    classification: str
    summary: str
    editorial_id: UUID
    language: str
    edition: str
    sample: str
    location: str
    book_status_id: UUID
    genres: List[str] = []
    book_img: str | None = None
    editorial: EditorialRead | None = None
    book_status: BookStatusRead | None = None
    authors: List[AuthorSummary] = []


class BookUpdate(BaseSchema):
    """Schema para atualização de livro (campos opcionais)."""
    title: str | None = Field(None, min_length=1, max_length=500)
    isbn: str | None = Field(None, min_length=1, max_length=20)
    classification: str | None = Field(None, min_length=1, max_length=100)
    summary: str | None = Field(None, min_length=1)
    editorial_id: UUID | None = None
    language: str | None = Field(None, min_length=1, max_length=50)
    edition: str | None = Field(None, min_length=1, max_length=50)
    sample: str | None = Field(None, min_length=1, max_length=50)
    location: str | None = Field(None, min_length=1, max_length=255)
    book_status_id: UUID | None = None
    genres: List[str] | None = None
    authors: List[UUID] | None = Field(None, min_length=1)
    book_img: str | None = Field(None, max_length=500)


class BookSummary(BaseSchema):
    """Livro resumido, embutido nos empréstimos."""
    id: UUID
    title: str
    classification: str
    book_status_id: UUID
