"""
Model de livro do acervo.
"""

import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key

if TYPE_CHECKING:
    from app.models.author import Author
    from app.models.editorial import Editorial
    from app.models.statuses import BookStatus

# Associação N:N entre livros e autores
book_authors = Table(
    "book_authors",
    Base.metadata,
    Column(
        "book_id",
        UUID(as_uuid=True),
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("authors.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)


class Book(Base, UUIDMixin, TimestampMixin):
    """
    Exemplar do acervo que pode ser emprestado.

    O `book_status` controla a disponibilidade: o LoanService só empresta
    livros AVAILABLE, marca-os como LENT e os devolve para AVAILABLE.

    Attributes:
        title: Título
        isbn: ISBN
        classification: Código de classificação (único, verificado pelo service)
        summary: Resumo
        editorial_id: FK para a editora
        language: Idioma
        edition: Edição
        sample: Identificação do exemplar
        location: Localização física na biblioteca
        book_status_id: FK para o status de disponibilidade
        genres: Gêneros literários
        authors: Autores
        book_img: URL da capa (opcional)
    """
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False)
    classification: Mapped[str] = mapped_column(String(100), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    editorial_id: Mapped[uuid.UUID] = foreign_key("editorials")
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    edition: Mapped[str] = mapped_column(String(50), nullable=False)
    sample: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    book_status_id: Mapped[uuid.UUID] = foreign_key("book_statuses")
    genres: Mapped[List[str]] = mapped_column(ARRAY(String(100)), nullable=False, default=list)
    book_img: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    editorial: Mapped["Editorial"] = relationship("Editorial", lazy="raise")
    book_status: Mapped["BookStatus"] = relationship("BookStatus", lazy="raise")
    authors: Mapped[List["Author"]] = relationship(
        "Author",
        secondary=book_authors,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Book {self.classification}>"
