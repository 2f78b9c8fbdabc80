"""Checklist item endpoints"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kanbanify.database import get_db
from kanbanify.models import Card, ChecklistItem
from kanbanify.queries import get_or_raise, next_checklist_position
from kanbanify.schemas import ChecklistItemCreate, ChecklistItemOut, ChecklistItemUpdate, SuccessResponse

router = APIRouter()


@router.post("", response_model=ChecklistItemOut, status_code=status.HTTP_201_CREATED)
async def create_checklist_item(item_data: ChecklistItemCreate, db: Session = Depends(get_db)):
    if not item_data.content or not item_data.card_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content and cardId are required")

    if db.get(Card, item_data.card_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")

    item = ChecklistItem(
        content=item_data.content,
        completed=item_data.completed,
        card_id=item_data.card_id,
        position=next_checklist_position(db, item_data.card_id),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=ChecklistItemOut)
async def update_checklist_item(item_id: str, item_data: ChecklistItemUpdate, db: Session = Depends(get_db)):
    """Partially update an item; omitted fields are left alone."""
    item = get_or_raise(db, ChecklistItem, item_id)

    for field, value in item_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(item, field, value)

    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=SuccessResponse)
async def delete_checklist_item(item_id: str, db: Session = Depends(get_db)):
    item = get_or_raise(db, ChecklistItem, item_id)
    db.delete(item)
    db.commit()
    return SuccessResponse()
