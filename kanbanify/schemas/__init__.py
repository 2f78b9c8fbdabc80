"""
Pydantic schemas for request/response validation
"""
from kanbanify.schemas.common import CamelModel, SuccessResponse
from kanbanify.schemas.team_member import TeamMemberCreate, TeamMemberOut, TeamMemberUpdate
from kanbanify.schemas.label import CardLabelCreate, CardLabelOut, LabelCreate, LabelOut, LabelUpdate
from kanbanify.schemas.checklist import ChecklistItemCreate, ChecklistItemOut, ChecklistItemUpdate
from kanbanify.schemas.card import AssignmentCreate, AssignmentOut, CardCreate, CardOut, CardUpdate
from kanbanify.schemas.board_list import ListCreate, ListOut, ListUpdate
from kanbanify.schemas.board import BoardAccessRequest, BoardCreate, BoardOut, BoardUpdate
from kanbanify.schemas.auth import AdminLoginRequest
from kanbanify.schemas.setup import DatabaseStats, DatabaseStatus

__all__ = [
    "CamelModel",
    "SuccessResponse",
    "TeamMemberCreate",
    "TeamMemberOut",
    "TeamMemberUpdate",
    "CardLabelCreate",
    "CardLabelOut",
    "LabelCreate",
    "LabelOut",
    "LabelUpdate",
    "ChecklistItemCreate",
    "ChecklistItemOut",
    "ChecklistItemUpdate",
    "AssignmentCreate",
    "AssignmentOut",
    "CardCreate",
    "CardOut",
    "CardUpdate",
    "ListCreate",
    "ListOut",
    "ListUpdate",
    "BoardAccessRequest",
    "BoardCreate",
    "BoardOut",
    "BoardUpdate",
    "AdminLoginRequest",
    "DatabaseStats",
    "DatabaseStatus",
]
