"""Query helpers with the fixed include shapes every endpoint returns."""
from typing import Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, selectinload

from kanbanify.errors import DatabaseErrorKind, PersistenceError
from kanbanify.models import (
    Board,
    BoardList,
    Card,
    CardAssignment,
    CardLabel,
    ChecklistItem,
    TeamMember,
)
from kanbanify.positions import next_position

ModelT = TypeVar("ModelT")


def _card_options(path):
    return (
        path.selectinload(Card.assignees).selectinload(CardAssignment.team_member),
        path.selectinload(Card.labels).selectinload(CardLabel.label),
        path.selectinload(Card.checklist),
    )


def board_query(db: Session) -> Query:
    cards = selectinload(Board.lists).selectinload(BoardList.cards)
    return db.query(Board).options(
        *_card_options(cards),
        selectinload(Board.members),
        selectinload(Board.labels),
    )


def list_query(db: Session) -> Query:
    return db.query(BoardList).options(*_card_options(selectinload(BoardList.cards)))


def card_query(db: Session) -> Query:
    return db.query(Card).options(
        selectinload(Card.assignees).selectinload(CardAssignment.team_member),
        selectinload(Card.labels).selectinload(CardLabel.label),
        selectinload(Card.checklist),
    )


def team_member_query(db: Session) -> Query:
    return db.query(TeamMember)


def load_board(db: Session, board_id: str) -> Optional[Board]:
    return board_query(db).filter(Board.id == board_id).first()


def load_list(db: Session, list_id: str) -> Optional[BoardList]:
    return list_query(db).filter(BoardList.id == list_id).first()


def load_card(db: Session, card_id: str) -> Optional[Card]:
    return card_query(db).filter(Card.id == card_id).first()


def get_or_raise(db: Session, model: Type[ModelT], item_id: str) -> ModelT:
    """Fetch a row by primary key or raise a not-found persistence error."""
    instance = db.get(model, item_id)
    if instance is None:
        raise PersistenceError(DatabaseErrorKind.NOT_FOUND, f"{model.__name__} {item_id} does not exist")
    return instance


def next_list_position(db: Session, board_id: str) -> int:
    highest = db.query(func.max(BoardList.position)).filter(BoardList.board_id == board_id).scalar()
    return next_position([highest])


def next_card_position(db: Session, list_id: str) -> int:
    highest = db.query(func.max(Card.position)).filter(Card.list_id == list_id).scalar()
    return next_position([highest])


def next_checklist_position(db: Session, card_id: str) -> int:
    highest = db.query(func.max(ChecklistItem.position)).filter(ChecklistItem.card_id == card_id).scalar()
    return next_position([highest])
