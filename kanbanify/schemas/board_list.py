"""Schemas for board lists"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from kanbanify.schemas.card import CardOut
from kanbanify.schemas.common import CamelModel


class ListCreate(CamelModel):
    title: Optional[str] = None
    board_id: Optional[str] = None
    position: Optional[int] = None
    color: Optional[str] = None


class ListUpdate(CamelModel):
    title: Optional[str] = None
    position: Optional[int] = None
    color: Optional[str] = None


class ListOut(CamelModel):
    id: str
    title: str
    position: int
    color: Optional[str] = None
    board_id: str
    created_at: Optional[datetime] = None
    cards: List[CardOut] = Field(default_factory=list)
