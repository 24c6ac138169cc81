"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the bookstore service.
Controllers are intentionally thin: they accept requests, delegate to
services, and return JSON responses.

Endpoints implemented:
- GET /books
- POST /books
- GET /books/{book_id}
- PUT /books/{book_id}
- DELETE /books/{book_id}
- GET /catalog/{book_id}
- GET /admin and everything under it (HTTP Basic)
- GET /health
"""

from fastapi import FastAPI, Depends, Request, status
from fastapi.responses import PlainTextResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import admin, services
from .catalog_client import CatalogClient
from .config import settings
from .exceptions import BookNotFoundError
from .schemas import BookIn, BookOut, CatalogEntryOut
from .utils.circuit_breaker import CircuitBreaker

app = FastAPI(title="Online Bookstore API")
logger = logging.getLogger("bookstore.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

_LOGGED_PREFIXES = ("/books", "/catalog", "/admin")

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()
app.state.admin_credentials = services.AdminCredentials(settings.ADMIN_USER, settings.ADMIN_PASSWORD)
app.state.catalog = services.CatalogService(
    CatalogClient(settings.CATALOG_URL, timeout=settings.CATALOG_TIMEOUT_SECONDS),
    CircuitBreaker(settings.CATALOG_FAILURE_THRESHOLD, settings.CATALOG_RESET_SECONDS),
)
logger.info("bookstore started profile=%s database=%s", settings.PROFILE, "sqlite" if settings.is_sqlite else "external")
app.include_router(admin.router)


def _request_summary(request: Request, req_id: str, started: float, **extra) -> str:
    fields = {
        "request_id": req_id,
        "method": request.method,
        "path": request.url.path,
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
    }
    fields.update(extra)
    return json.dumps(fields, ensure_ascii=True)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Tag every response with `X-Request-ID` and log calls to the API routes."""
    req_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s", _request_summary(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    if request.url.path.startswith(_LOGGED_PREFIXES):
        logger.info("request_done %s", _request_summary(request, req_id, started, status_code=response.status_code))
    return response


@app.exception_handler(BookNotFoundError)
async def book_not_found_handler(request: Request, exc: BookNotFoundError):
    """Translate a failed lookup into a plain-text 404."""
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


@app.get('/books', response_model=List[BookOut])
def list_books(db: Session = Depends(get_session)):
    """Return every stored book."""
    return services.BookService(db).list_books()


@app.post('/books', response_model=BookOut)
def create_book(payload: BookIn, db: Session = Depends(get_session)):
    """Store a new book and return it with its assigned id."""
    return services.BookService(db).create_book(payload)


@app.get('/books/{book_id}', response_model=BookOut)
def get_book(book_id: int, db: Session = Depends(get_session)):
    return services.BookService(db).get_book(book_id)


@app.put('/books/{book_id}', response_model=BookOut)
def update_book(book_id: int, payload: BookIn, db: Session = Depends(get_session)):
    """Replace title, author and price of an existing book."""
    return services.BookService(db).update_book(book_id, payload)


@app.delete('/books/{book_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, db: Session = Depends(get_session)):
    services.BookService(db).delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get('/catalog/{book_id}', response_model=CatalogEntryOut)
def catalog_lookup(book_id: int, request: Request):
    """Look a book up in the downstream catalog.

    When the catalog cannot answer, a placeholder record is returned with
    `fallback` set to true instead of an error.
    """
    return request.app.state.catalog.lookup(book_id)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
