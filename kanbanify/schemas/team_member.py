"""Schemas for board team members"""
from datetime import datetime
from typing import Optional

from kanbanify.schemas.common import CamelModel


class TeamMemberCreate(CamelModel):
    name: Optional[str] = None
    board_id: Optional[str] = None
    color: Optional[str] = None


class TeamMemberUpdate(CamelModel):
    name: Optional[str] = None
    color: Optional[str] = None


class TeamMemberOut(CamelModel):
    id: str
    name: str
    color: str
    board_id: str
    created_at: Optional[datetime] = None
