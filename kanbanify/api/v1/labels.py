"""Label endpoints"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from kanbanify.database import get_db
from kanbanify.models import Board, Label
from kanbanify.queries import get_or_raise
from kanbanify.schemas import LabelCreate, LabelOut, LabelUpdate, SuccessResponse

router = APIRouter()


@router.get("", response_model=List[LabelOut])
async def list_labels(board_id: Optional[str] = Query(default=None, alias="boardId"), db: Session = Depends(get_db)):
    if not board_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Board ID is required")

    return db.query(Label).filter(Label.board_id == board_id).order_by(Label.name.asc()).all()


@router.post("", response_model=LabelOut, status_code=status.HTTP_201_CREATED)
async def create_label(label_data: LabelCreate, db: Session = Depends(get_db)):
    if not label_data.name or not label_data.color or not label_data.board_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Label name, color and board ID are required",
        )

    if db.get(Board, label_data.board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    label = Label(name=label_data.name, color=label_data.color, board_id=label_data.board_id)
    db.add(label)
    db.commit()
    db.refresh(label)
    return label


@router.put("/{label_id}", response_model=LabelOut)
async def update_label(label_id: str, label_data: LabelUpdate, db: Session = Depends(get_db)):
    label = get_or_raise(db, Label, label_id)

    for field, value in label_data.model_dump(exclude_unset=True).items():
        if value:
            setattr(label, field, value)

    db.commit()
    db.refresh(label)
    return label


@router.delete("/{label_id}", response_model=SuccessResponse)
async def delete_label(label_id: str, db: Session = Depends(get_db)):
    label = get_or_raise(db, Label, label_id)
    db.delete(label)
    db.commit()
    return SuccessResponse()
