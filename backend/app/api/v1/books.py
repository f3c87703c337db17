"""
Endpoints de livros, gerados por `build_crud_router`.

Filtros aceitos: title, isbn, classification, summary, editorial, language,
edition, sample, location, book_status.
"""

from app.api.v1.crud import build_crud_router
from app.schemas.book import BookCreate, BookRead, BookUpdate
from app.services.book import BookService

router = build_crud_router(
    prefix="/books",
    tags=["Books"],
    label="livro",
    service_class=BookService,
    create_schema=BookCreate,
    read_schema=BookRead,
    update_schema=BookUpdate,
)
