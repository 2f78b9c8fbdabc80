"""List endpoints"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from kanbanify.database import get_db
from kanbanify.models import Board, BoardList
from kanbanify.queries import get_or_raise, list_query, load_list, next_list_position
from kanbanify.schemas import ListCreate, ListOut, ListUpdate, SuccessResponse

router = APIRouter()


@router.get("", response_model=List[ListOut])
async def list_lists(board_id: Optional[str] = Query(default=None, alias="boardId"), db: Session = Depends(get_db)):
    if not board_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Board ID is required")

    return (
        list_query(db)
        .filter(BoardList.board_id == board_id)
        .order_by(BoardList.position.asc(), BoardList.created_at.asc(), BoardList.id.asc())
        .all()
    )


@router.post("", response_model=ListOut, status_code=status.HTTP_201_CREATED)
async def create_list(list_data: ListCreate, db: Session = Depends(get_db)):
    """Append a list to a board, or place it at an explicit position."""
    if not list_data.title or not list_data.board_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="List title and board ID are required")

    if db.get(Board, list_data.board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    position = list_data.position
    if position is None:
        position = next_list_position(db, list_data.board_id)

    board_list = BoardList(
        title=list_data.title,
        board_id=list_data.board_id,
        position=position,
        color=list_data.color,
    )
    db.add(board_list)
    db.commit()

    return load_list(db, board_list.id)


@router.put("/{list_id}", response_model=ListOut)
async def update_list(list_id: str, list_data: ListUpdate, db: Session = Depends(get_db)):
    board_list = get_or_raise(db, BoardList, list_id)

    for field, value in list_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(board_list, field, value)

    db.commit()
    return load_list(db, list_id)


@router.delete("/{list_id}", response_model=SuccessResponse)
async def delete_list(list_id: str, db: Session = Depends(get_db)):
    board_list = get_or_raise(db, BoardList, list_id)
    db.delete(board_list)
    db.commit()
    return SuccessResponse()
