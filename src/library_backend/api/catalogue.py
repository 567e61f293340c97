"""Book, copy and reader endpoints."""

from fastapi import APIRouter, Depends, Query, status

from library_backend.api.dependencies import get_container, require_principal
from library_backend.api.schemas import (
    BookCreate,
    CopyCreate,
    CopyStatusUpdate,
    ReaderCreate,
    serialize_book,
    serialize_copy,
    serialize_reader,
)
from library_backend.containers import AppContainer

router = APIRouter(tags=["catalogue"], dependencies=[Depends(require_principal)])


@router.get("/books")
async def list_books(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return all books."""
    books = container.book_service.list_books()
    return {"books": [serialize_book(book) for book in books]}


@router.post("/books", status_code=status.HTTP_201_CREATED)
async def add_book(
    payload: BookCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Add a book to the catalogue."""
    book = container.book_service.add_book(
        payload.title, payload.author, payload.publication_year
    )
    return serialize_book(book)


@router.get("/books/{book_id}")
async def get_book(
    book_id: int, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    return serialize_book(container.book_service.get_book(book_id))


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int, container: AppContainer = Depends(get_container)
) -> None:
    container.book_service.delete_book(book_id)


@router.get("/copies")
async def list_copies(
    title: str | None = Query(default=None),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return all copies, or the available copies of a title."""
    if title is None:
        copies = container.copy_service.find_all_copies()
    else:
        copies = container.copy_service.available_copies_for_title(title)
    return {"copies": [serialize_copy(copy) for copy in copies]}


@router.post("/copies", status_code=status.HTTP_201_CREATED)
async def add_copy(
    payload: CopyCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Add a copy of an existing book."""
    copy = container.copy_service.save_copy(payload.book_id, payload.status)
    return serialize_copy(copy)


@router.get("/copies/{copy_id}")
async def get_copy(
    copy_id: int, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    return serialize_copy(container.copy_service.find_copy(copy_id))


@router.patch("/copies/{copy_id}/status")
async def change_copy_status(
    copy_id: int,
    payload: CopyStatusUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Change the lending status of a copy."""
    copy = container.copy_service.change_status(copy_id, payload.status)
    return serialize_copy(copy)


@router.delete("/copies/{copy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_copy(
    copy_id: int, container: AppContainer = Depends(get_container)
) -> None:
    container.copy_service.delete_copy(copy_id)


@router.get("/readers")
async def list_readers(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    readers = container.reader_service.list_readers()
    return {"readers": [serialize_reader(reader) for reader in readers]}


@router.post("/readers", status_code=status.HTTP_201_CREATED)
async def register_reader(
    payload: ReaderCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Register a new reader."""
    reader = container.reader_service.register_reader(
        payload.first_name, payload.last_name, payload.email
    )
    return serialize_reader(reader)


@router.get("/readers/{reader_id}")
async def get_reader(
    reader_id: int, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    return serialize_reader(container.reader_service.get_reader(reader_id))


@router.delete("/readers/{reader_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reader(
    reader_id: int, container: AppContainer = Depends(get_container)
) -> None:
    container.reader_service.delete_reader(reader_id)
