"""Schemas for boards and board access"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from kanbanify.schemas.board_list import ListOut
from kanbanify.schemas.common import CamelModel
from kanbanify.schemas.label import LabelOut
from kanbanify.schemas.team_member import TeamMemberOut


class BoardCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    background: Optional[str] = None
    access_code: Optional[str] = None


class BoardUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    background: Optional[str] = None


class BoardOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    background: str
    access_code: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    lists: List[ListOut] = Field(default_factory=list)
    members: List[TeamMemberOut] = Field(default_factory=list)
    labels: List[LabelOut] = Field(default_factory=list)


class BoardAccessRequest(CamelModel):
    access_code: Optional[str] = None
    email: Optional[str] = None
