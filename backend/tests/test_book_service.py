"""
Testes unitários para BookService.
"""

import uuid
from unittest.mock import patch

import pytest

from app.core.errors import ObjectAlreadyExists, ObjectMissingParameters, ObjectNotFound
from app.models.author import Author
from app.models.book import Book
from app.schemas.book import BookCreate, BookUpdate
from app.services.book import BookService


@pytest.fixture
def service(mock_db):
    return BookService(mock_db)


@pytest.fixture
def authors(sample_gender):
    return [
        Author(id=uuid.uuid4(), name="Machado", last_name="de Assis", gender_id=sample_gender.id),
        Author(id=uuid.uuid4(), name="José", last_name="de Alencar", gender_id=sample_gender.id),
    ]


@pytest.fixture
def references(service):
    """Editora e status sempre existentes."""
    editorial_repo = service.reference_repos["editorial_id"][1]
    status_repo = service.reference_repos["book_status_id"][1]
    with patch.object(editorial_repo, "find_by_id", return_value=object()), \
         patch.object(status_repo, "find_by_id", return_value=object()):
        yield


def _book_request(sample_book, author_ids, **overrides):
    values = {
        "title": sample_book.title,
        "isbn": sample_book.isbn,
        "classification": sample_book.classification,
        "summary": sample_book.summary,
        "editorial_id": sample_book.editorial_id,
        "language": sample_book.language,
        "edition": sample_book.edition,
        "sample": sample_book.sample,
        "location": sample_book.location,
        "book_status_id": sample_book.book_status_id,
        "authors": author_ids,
    }
    values.update(overrides)
    return BookCreate(**values)


class TestBookCreate:

    @pytest.mark.anyio
    async def test_create_resolves_authors(self, service, references, sample_book, authors):
        ids = [author.id for author in authors]

        with patch.object(service.author_repo, "find_by_ids", return_value=authors), \
             patch.object(service.repo, "find_matching", return_value=[]), \
             patch.object(service.repo, "create", return_value=sample_book) as mock_create:
            book = await service.create(_book_request(sample_book, ids))

        assert book is sample_book
        kwargs = mock_create.await_args.kwargs
        assert kwargs["authors"] == authors
        assert kwargs["classification"] == sample_book.classification
        assert kwargs["genres"] == []

    @pytest.mark.anyio
    async def test_unknown_author(self, service, references, sample_book, authors):
        ids = [authors[0].id, uuid.uuid4()]

        with patch.object(service.author_repo, "find_by_ids", return_value=authors[:1]), \
             patch.object(service.repo, "find_matching", return_value=[]), \
             patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ObjectNotFound) as exc_info:
                await service.create(_book_request(sample_book, ids))

        assert exc_info.value.name == "AuthorNotFound"
        mock_create.assert_not_called()

    @pytest.mark.anyio
    async def test_repeated_author_ids_count_once(self, service, references, sample_book, authors):
        ids = [authors[0].id, authors[0].id]

        with patch.object(service.author_repo, "find_by_ids", return_value=authors[:1]) as mock_find, \
             patch.object(service.repo, "find_matching", return_value=[]), \
             patch.object(service.repo, "create", return_value=sample_book):
            await service.create(_book_request(sample_book, ids))

        assert mock_find.await_args.args[0] == [authors[0].id]

    @pytest.mark.anyio
    async def test_duplicate_classification(self, service, references, sample_book, authors):
        with patch.object(service.repo, "find_matching", return_value=[sample_book]) as mock_match, \
             patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ObjectAlreadyExists) as exc_info:
                await service.create(_book_request(sample_book, [authors[0].id]))

        assert exc_info.value.name == "BookAlreadyExists"
        mock_match.assert_awaited_once_with(classification=sample_book.classification)
        mock_create.assert_not_called()

    @pytest.mark.anyio
    async def test_missing_book_status(self, service, sample_book, authors):
        editorial_repo = service.reference_repos["editorial_id"][1]
        status_repo = service.reference_repos["book_status_id"][1]

        with patch.object(editorial_repo, "find_by_id", return_value=object()), \
             patch.object(status_repo, "find_by_id", return_value=None):
            with pytest.raises(ObjectNotFound) as exc_info:
                await service.create(_book_request(sample_book, [authors[0].id]))

        assert exc_info.value.name == "BookStatusNotFound"

    def test_book_requires_an_author(self, sample_book):
        with pytest.raises(ValueError):
            _book_request(sample_book, [])


class TestBookUpdate:

    @pytest.mark.anyio
    async def test_replace_authors_only(self, service, references, sample_book, authors):
        with patch.object(service.repo, "find_by_id", return_value=sample_book), \
             patch.object(service.repo, "find_matching", return_value=[sample_book]), \
             patch.object(service.author_repo, "find_by_ids", return_value=authors[1:]), \
             patch.object(service.repo, "update", return_value=sample_book) as mock_update:
            await service.update(sample_book.id, BookUpdate(authors=[authors[1].id]))

        assert mock_update.await_args.kwargs == {"authors": authors[1:]}

    @pytest.mark.anyio
    async def test_classification_of_another_book(self, service, references, sample_book):
        other = Book(id=uuid.uuid4(), classification="869.3 A848m")

        with patch.object(service.repo, "find_by_id", return_value=sample_book), \
             patch.object(service.repo, "find_matching", return_value=[other]), \
             patch.object(service.repo, "update") as mock_update:
            with pytest.raises(ObjectAlreadyExists):
                await service.update(sample_book.id, BookUpdate(classification="869.3 A848m"))

        mock_update.assert_not_called()

    @pytest.mark.anyio
    async def test_update_without_changes(self, service, sample_book):
        with pytest.raises(ObjectMissingParameters):
            await service.update(sample_book.id, BookUpdate())
