"""Card, assignment and card label endpoints"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, selectinload

from kanbanify.database import get_db
from kanbanify.errors import DatabaseErrorKind, PersistenceError
from kanbanify.models import BoardList, Card, CardAssignment, CardLabel, CardPriority, Label, TeamMember
from kanbanify.queries import card_query, get_or_raise, load_card, next_card_position
from kanbanify.schemas import (
    AssignmentCreate,
    AssignmentOut,
    CardCreate,
    CardLabelCreate,
    CardLabelOut,
    CardOut,
    CardUpdate,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _card_or_404(db: Session, card_id: str) -> Card:
    card = load_card(db, card_id)
    if not card:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return card


def _ensure_list(db: Session, list_id: str) -> BoardList:
    board_list = db.get(BoardList, list_id)
    if board_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="List not found")
    return board_list


@router.get("", response_model=List[CardOut])
async def list_cards(
    list_id: Optional[str] = Query(default=None, alias="listId"),
    board_id: Optional[str] = Query(default=None, alias="boardId"),
    db: Session = Depends(get_db),
):
    """Return cards of one list, of one board, or all cards."""
    query = card_query(db)
    if list_id:
        query = query.filter(Card.list_id == list_id)
    elif board_id:
        query = query.join(BoardList, Card.list_id == BoardList.id).filter(BoardList.board_id == board_id)

    return query.order_by(Card.position.asc(), Card.created_at.asc(), Card.id.asc()).all()


@router.post("", response_model=CardOut, status_code=status.HTTP_201_CREATED)
async def create_card(card_data: CardCreate, db: Session = Depends(get_db)):
    """Append a card to the end of a list."""
    if not card_data.title or not card_data.list_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Card title and list ID are required")

    _ensure_list(db, card_data.list_id)

    card = Card(
        title=card_data.title,
        description=card_data.description,
        list_id=card_data.list_id,
        priority=card_data.priority or CardPriority.MEDIUM,
        due_date=card_data.due_date,
        position=next_card_position(db, card_data.list_id),
    )
    db.add(card)
    db.commit()

    return _card_or_404(db, card.id)


@router.get("/{card_id}", response_model=CardOut)
async def get_card(card_id: str, db: Session = Depends(get_db)):
    return _card_or_404(db, card_id)


@router.put("/{card_id}", response_model=CardOut)
async def update_card(card_id: str, card_data: CardUpdate, db: Session = Depends(get_db)):
    """Edit a card and/or move it.

    Moving to a different list without an explicit position puts the card at
    the end of the target list.
    """
    card = get_or_raise(db, Card, card_id)
    update_data = card_data.model_dump(exclude_unset=True)

    for field in ("title", "priority", "status"):
        if update_data.get(field) is not None:
            setattr(card, field, update_data[field])
    for field in ("description", "due_date"):
        if field in update_data:
            setattr(card, field, update_data[field])

    target_list_id = update_data.get("list_id")
    position = update_data.get("position")
    if target_list_id and target_list_id != card.list_id:
        _ensure_list(db, target_list_id)
        if position is None:
            position = next_card_position(db, target_list_id)
        card.list_id = target_list_id
    if position is not None:
        card.position = position

    db.commit()
    return _card_or_404(db, card_id)


@router.delete("/{card_id}", response_model=SuccessResponse)
async def delete_card(card_id: str, db: Session = Depends(get_db)):
    card = get_or_raise(db, Card, card_id)
    db.delete(card)
    db.commit()
    return SuccessResponse()


@router.post("/{card_id}/assignments", response_model=AssignmentOut, status_code=status.HTTP_201_CREATED)
async def assign_member(card_id: str, assignment_data: AssignmentCreate, db: Session = Depends(get_db)):
    """Assign a team member to a card. A member can be assigned only once."""
    member_id = assignment_data.team_member_id
    if not member_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Team member ID is required")

    get_or_raise(db, Card, card_id)
    get_or_raise(db, TeamMember, member_id)

    if db.get(CardAssignment, (card_id, member_id)) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Team member is already assigned to this card",
        )

    db.add(CardAssignment(card_id=card_id, team_member_id=member_id))
    db.commit()

    return (
        db.query(CardAssignment)
        .options(selectinload(CardAssignment.team_member))
        .filter(CardAssignment.card_id == card_id, CardAssignment.team_member_id == member_id)
        .one()
    )


@router.delete("/{card_id}/assignments", response_model=SuccessResponse)
async def unassign_member(
    card_id: str,
    team_member_id: Optional[str] = Query(default=None, alias="teamMemberId"),
    db: Session = Depends(get_db),
):
    if not team_member_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Team member ID is required")

    assignment = db.get(CardAssignment, (card_id, team_member_id))
    if assignment is None:
        raise PersistenceError(DatabaseErrorKind.NOT_FOUND, f"No assignment of {team_member_id} on {card_id}")

    db.delete(assignment)
    db.commit()
    return SuccessResponse()


@router.post("/{card_id}/labels", response_model=CardLabelOut, status_code=status.HTTP_201_CREATED)
async def add_label(card_id: str, label_data: CardLabelCreate, db: Session = Depends(get_db)):
    label_id = label_data.label_id
    if not label_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Label ID is required")

    get_or_raise(db, Card, card_id)
    get_or_raise(db, Label, label_id)

    if db.get(CardLabel, (card_id, label_id)) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Label is already attached to this card")

    db.add(CardLabel(card_id=card_id, label_id=label_id))
    db.commit()

    return (
        db.query(CardLabel)
        .options(selectinload(CardLabel.label))
        .filter(CardLabel.card_id == card_id, CardLabel.label_id == label_id)
        .one()
    )


@router.delete("/{card_id}/labels", response_model=SuccessResponse)
async def remove_label(
    card_id: str,
    label_id: Optional[str] = Query(default=None, alias="labelId"),
    db: Session = Depends(get_db),
):
    if not label_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Label ID is required")

    card_label = db.get(CardLabel, (card_id, label_id))
    if card_label is None:
        raise PersistenceError(DatabaseErrorKind.NOT_FOUND, f"Label {label_id} is not attached to {card_id}")

    db.delete(card_label)
    db.commit()
    return SuccessResponse()
