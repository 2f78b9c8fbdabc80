"""Utilities for ensuring string primary keys are populated."""
from __future__ import annotations

import secrets
import uuid
from typing import Type

from sqlalchemy import event
from sqlalchemy.orm import Mapper


def generate_id() -> str:
    return uuid.uuid4().hex


def generate_access_code() -> str:
    """Return a 16 character hex code suitable for a board's access code."""
    return secrets.token_hex(8)


def register_id_listener(model: Type[object], pk_name: str = "id") -> None:
    """Ensure ``model`` receives an opaque string primary key before insert.

    Callers may supply their own identifier (fixtures and imports do); the
    listener only fills the column when it is still empty at flush time, so
    rows created through relationships get an id without every call site
    having to remember it.
    """

    table = getattr(model, "__table__", None)
    if table is None or pk_name not in table.c:
        raise ValueError(f"Model {model!r} does not expose a '{pk_name}' column")

    @event.listens_for(model, "before_insert", propagate=True)
    def _assign_string_pk(_: Mapper, connection, target) -> None:  # pragma: no cover - SQLAlchemy callback
        if getattr(target, pk_name) is not None:
            return
        setattr(target, pk_name, generate_id())
