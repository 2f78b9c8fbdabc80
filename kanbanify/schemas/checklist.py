"""Schemas for card checklist items"""
from datetime import datetime
from typing import Optional

from kanbanify.schemas.common import CamelModel


class ChecklistItemCreate(CamelModel):
    content: Optional[str] = None
    card_id: Optional[str] = None
    completed: bool = False


class ChecklistItemUpdate(CamelModel):
    content: Optional[str] = None
    completed: Optional[bool] = None
    position: Optional[int] = None


class ChecklistItemOut(CamelModel):
    id: str
    content: str
    completed: bool
    card_id: str
    position: int
    created_at: Optional[datetime] = None
