"""
Error kinds and HTTP translation.

Every failure response carries the same envelope, ``{"error": "<message>"}``.
Database failures are reduced to one of four kinds before they reach a
handler so the user-facing wording never depends on driver text.
"""
import enum
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from kanbanify.config import settings

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class DatabaseErrorKind(str, enum.Enum):
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_FOUND = "not_found"
    OTHER = "other"


DATABASE_ERROR_MESSAGES = {
    DatabaseErrorKind.UNIQUE_VIOLATION: "A record with this information already exists",
    DatabaseErrorKind.FOREIGN_KEY_VIOLATION: "Cannot delete this item because it is referenced by other items",
    DatabaseErrorKind.NOT_FOUND: "The requested item was not found",
    DatabaseErrorKind.OTHER: "A database error occurred",
}

# SQLSTATE codes (PostgreSQL and most others) and SQLite extended error names
_UNIQUE_CODES = {"23505", "SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
_FOREIGN_KEY_CODES = {"23503", "SQLITE_CONSTRAINT_FOREIGNKEY"}


class PersistenceError(Exception):
    """A database failure reduced to a :class:`DatabaseErrorKind`."""

    def __init__(self, kind: DatabaseErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(detail or self.message)

    @property
    def message(self) -> str:
        return DATABASE_ERROR_MESSAGES[self.kind]

    @property
    def status_code(self) -> int:
        if self.kind is DatabaseErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND
        return status.HTTP_500_INTERNAL_SERVER_ERROR


def _driver_code(error: BaseException) -> Optional[str]:
    for attribute in ("pgcode", "sqlstate", "sqlite_errorname"):
        value = getattr(error, attribute, None)
        if value:
            return str(value)
    return None


def classify_database_error(error: BaseException) -> DatabaseErrorKind:
    """Map a SQLAlchemy/DBAPI exception onto a :class:`DatabaseErrorKind`."""
    if isinstance(error, PersistenceError):
        return error.kind
    if isinstance(error, NoResultFound):
        return DatabaseErrorKind.NOT_FOUND
    if isinstance(error, IntegrityError):
        original = error.orig
        code = _driver_code(original) if original is not None else None
        if code in _UNIQUE_CODES:
            return DatabaseErrorKind.UNIQUE_VIOLATION
        if code in _FOREIGN_KEY_CODES:
            return DatabaseErrorKind.FOREIGN_KEY_VIOLATION
        # sqlite3 before Python 3.11 exposes no error name
        text = str(original).upper()
        if "UNIQUE" in text:
            return DatabaseErrorKind.UNIQUE_VIOLATION
        if "FOREIGN KEY" in text:
            return DatabaseErrorKind.FOREIGN_KEY_VIOLATION
    return DatabaseErrorKind.OTHER


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else UNKNOWN_ERROR_MESSAGE
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def persistence_exception_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    if exc.kind is not DatabaseErrorKind.NOT_FOUND:
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.detail or exc.kind.value)
    return error_response(exc.status_code, exc.message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    kind = classify_database_error(exc)
    if settings.DEBUG:
        logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    else:
        logger.error("Database error on %s %s (%s)", request.method, request.url.path, kind.value)
    status_code = PersistenceError(kind).status_code
    return error_response(status_code, DATABASE_ERROR_MESSAGES[kind])


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PersistenceError, persistence_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
