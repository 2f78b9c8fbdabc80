"""Kanbanify Database Models"""
from kanbanify.models.board import Board
from kanbanify.models.board_list import BoardList
from kanbanify.models.card import Card, CardPriority, CardStatus
from kanbanify.models.team_member import TeamMember
from kanbanify.models.card_assignment import CardAssignment
from kanbanify.models.label import Label, CardLabel
from kanbanify.models.checklist_item import ChecklistItem
from kanbanify.models.board_access import BoardAccess
from kanbanify.utils.identifiers import register_id_listener

__all__ = [
    "Board",
    "BoardList",
    "Card",
    "CardPriority",
    "CardStatus",
    "TeamMember",
    "CardAssignment",
    "Label",
    "CardLabel",
    "ChecklistItem",
    "BoardAccess",
]


for _model in (
    Board,
    BoardList,
    Card,
    TeamMember,
    Label,
    ChecklistItem,
    BoardAccess,
):
    register_id_listener(_model)
