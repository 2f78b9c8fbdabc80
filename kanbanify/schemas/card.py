"""Schemas for cards and their assignments"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from kanbanify.models.card import CardPriority, CardStatus
from kanbanify.schemas.checklist import ChecklistItemOut
from kanbanify.schemas.common import CamelModel
from kanbanify.schemas.label import CardLabelOut
from kanbanify.schemas.team_member import TeamMemberOut


class CardCreate(CamelModel):
    title: Optional[str] = None
    list_id: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[CardPriority] = None
    due_date: Optional[datetime] = None


class CardUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[CardPriority] = None
    status: Optional[CardStatus] = None
    due_date: Optional[datetime] = None
    list_id: Optional[str] = None
    position: Optional[int] = None


class AssignmentCreate(CamelModel):
    team_member_id: Optional[str] = None


class AssignmentOut(CamelModel):
    card_id: str
    team_member_id: str
    assigned_at: Optional[datetime] = None
    team_member: Optional[TeamMemberOut] = None


class CardOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    position: int
    due_date: Optional[datetime] = None
    priority: CardPriority = CardPriority.MEDIUM
    status: CardStatus = CardStatus.ACTIVE
    list_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    assignees: List[AssignmentOut] = Field(default_factory=list)
    labels: List[CardLabelOut] = Field(default_factory=list)
    checklist: List[ChecklistItemOut] = Field(default_factory=list)
