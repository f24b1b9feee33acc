"""HTMX UI router for the book catalog."""

from html import escape
from typing import List, Optional, Union

import httpx
from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from ...modules.book.schemas import Book
from ...modules.common.exceptions import DomainError
from ...modules.common.utils.error_handler import handle_exception
from ...modules.notifications import ToastNotifier
from ..dependencies import BookStoreDep, ToastDep

router = APIRouter(prefix="/ui", tags=["ui"])


def _error_response(toast: ToastNotifier, error: Exception) -> HTMLResponse:
    """Render a failure as an inline error block plus a toast."""
    mapped = handle_exception(error)
    if mapped is None:
        raise error
    toast_type, message = mapped

    response = HTMLResponse(f"""
    <div class="bg-red-100 border border-red-400 text-red-700 px-4 py-3 rounded">
        <strong>Error:</strong> {escape(message)}
    </div>
    """)
    return toast.attach(response, toast.toast(message, toast_type))


def _parse_year(value: Optional[str]) -> Optional[Union[int, str]]:
    """Keep numeric years as numbers and anything else as entered."""
    if value is None or not value.strip():
        return None
    value = value.strip()
    return int(value) if value.isdigit() else value


def _render_book_row(book: Book) -> str:
    book_id = escape(book.id or "")
    title = escape(book.title or "Untitled")
    author = escape(book.author or "Unknown author")
    year = f" ({escape(str(book.published_year))})" if book.published_year else ""

    return f"""
    <div id="book-{book_id}" class="bg-gray-50 p-3 rounded border">
        <div class="flex justify-between items-center">
            <div class="flex-1">
                <strong>{title}</strong>{year}
                <p class="text-sm text-gray-600">{author}</p>
            </div>
            <div class="flex gap-2 ml-4">
                <button hx-get="/ui/books/{book_id}"
                        hx-target="#book-details"
                        hx-swap="innerHTML"
                        class="bg-blue-500 hover:bg-blue-600 text-white px-2 py-1 rounded text-xs">
                    Edit
                </button>
                <button hx-delete="/ui/books/{book_id}"
                        hx-target="#book-{book_id}"
                        hx-swap="outerHTML"
                        hx-confirm="Delete '{title}'?"
                        class="bg-red-500 hover:bg-red-600 text-white px-2 py-1 rounded text-xs">
                    Delete
                </button>
            </div>
        </div>
    </div>
    """  # noqa: E501


def _render_book_list(books: List[Book]) -> str:
    if not books:
        return '<div class="text-gray-500 italic">No books in the catalog yet. Add one above!</div>'

    return '<div class="space-y-2">' + "".join(_render_book_row(book) for book in books) + "</div>"


def _render_edit_form(book: Book) -> str:
    book_id = escape(book.id or "")

    def value(field: Optional[object]) -> str:
        return escape(str(field)) if field is not None else ""

    return f"""
    <form hx-put="/ui/books/{book_id}" hx-target="#book-list" hx-swap="innerHTML" class="space-y-2">
        <input name="title" value="{value(book.title)}" placeholder="Title" class="border rounded px-2 py-1 w-full">
        <input name="author" value="{value(book.author)}" placeholder="Author" class="border rounded px-2 py-1 w-full">
        <textarea name="description" placeholder="Description" class="border rounded px-2 py-1 w-full">{value(book.description)}</textarea>
        <input name="published_year" value="{value(book.published_year)}" placeholder="Year" class="border rounded px-2 py-1">
        <input name="isbn" value="{value(book.isbn)}" placeholder="ISBN" class="border rounded px-2 py-1">
        <button type="submit" class="bg-green-500 hover:bg-green-600 text-white px-3 py-1 rounded text-sm">Save</button>
    </form>
    """  # noqa: E501


@router.get("/books", response_class=HTMLResponse)
async def list_books_ui(store: BookStoreDep, toast: ToastDep):
    """List books via HTMX."""
    try:
        books = await store.fetch_books()
    except (DomainError, httpx.HTTPError) as e:
        return _error_response(toast, e)

    return HTMLResponse(_render_book_list(books))


@router.get("/books/{book_id}", response_class=HTMLResponse)
async def get_book_ui(book_id: str, store: BookStoreDep, toast: ToastDep):
    """Show the edit form for one book via HTMX."""
    try:
        book = await store.fetch_book(book_id)
    except (DomainError, httpx.HTTPError) as e:
        return _error_response(toast, e)

    return HTMLResponse(_render_edit_form(book))


@router.post("/books", response_class=HTMLResponse)
async def add_book_ui(
    store: BookStoreDep,
    toast: ToastDep,
    title: str = Form(...),
    author: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    published_year: Optional[str] = Form(None),
    isbn: Optional[str] = Form(None),
):
    """Add a book via HTMX form and re-render the list."""
    fields = {
        "title": title,
        "author": author,
        "description": description,
        "published_year": _parse_year(published_year),
        "isbn": isbn,
    }

    try:
        book = Book(**{name: value for name, value in fields.items() if value is not None})
        created = await store.add_book(book)
    except (DomainError, httpx.HTTPError) as e:
        return _error_response(toast, e)

    response = HTMLResponse(_render_book_list(store.books))
    return toast.attach(response, toast.success(f'Added "{created.title}"'))


@router.put("/books/{book_id}", response_class=HTMLResponse)
async def edit_book_ui(
    book_id: str,
    store: BookStoreDep,
    toast: ToastDep,
    title: str = Form(...),
    author: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    published_year: Optional[str] = Form(None),
    isbn: Optional[str] = Form(None),
):
    """Save edited book details via HTMX form and re-render the list."""
    changes = {
        "title": title,
        "author": author,
        "description": description,
        "published_year": _parse_year(published_year),
        "isbn": isbn,
    }
    current = store.find(book_id) or Book(id=book_id)
    book = current.model_copy(update=changes)

    try:
        updated = await store.edit_book(book)
    except (DomainError, httpx.HTTPError) as e:
        return _error_response(toast, e)

    response = HTMLResponse(_render_book_list(store.books))
    return toast.attach(response, toast.success(f'Saved "{updated.title}"'))


@router.delete("/books/{book_id}", response_class=HTMLResponse)
async def delete_book_ui(book_id: str, store: BookStoreDep, toast: ToastDep):
    """Delete a book via HTMX."""
    try:
        await store.remove_book(book_id)
    except (DomainError, httpx.HTTPError) as e:
        return _error_response(toast, e)

    return toast.attach(HTMLResponse(""), toast.info("Book deleted"))
