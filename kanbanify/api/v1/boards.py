"""Board endpoints"""
import logging
import secrets
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from kanbanify.auth import ensure_admin
from kanbanify.config import settings
from kanbanify.database import get_db, utcnow
from kanbanify.models import Board, BoardAccess, BoardList
from kanbanify.positions import POSITION_GAP
from kanbanify.queries import board_query, get_or_raise, load_board
from kanbanify.schemas import BoardAccessRequest, BoardCreate, BoardOut, BoardUpdate, SuccessResponse
from kanbanify.utils.identifiers import generate_access_code

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LISTS = (
    ("To Do", "#fef2f2"),
    ("In Progress", "#fef3e2"),
    ("Review", "#f0f9ff"),
    ("Done", "#f0fdf4"),
)


def _board_or_404(db: Session, board_id: str) -> Board:
    board = load_board(db, board_id)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")
    return board


@router.get("", response_model=List[BoardOut])
async def list_boards(db: Session = Depends(get_db)):
    """Return every board with its lists, cards, members and labels."""
    return board_query(db).order_by(Board.updated_at.desc()).all()


@router.post("", response_model=BoardOut, status_code=status.HTTP_201_CREATED)
async def create_board(board_data: BoardCreate, db: Session = Depends(get_db)):
    """Create a board seeded with the four default lists."""
    if not board_data.title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Board title is required")

    board = Board(
        title=board_data.title,
        description=board_data.description,
        background=board_data.background or settings.DEFAULT_BOARD_BACKGROUND,
        access_code=board_data.access_code or generate_access_code(),
    )
    for index, (title, color) in enumerate(DEFAULT_LISTS):
        board.lists.append(BoardList(title=title, position=(index + 1) * POSITION_GAP, color=color))

    db.add(board)
    db.commit()

    return _board_or_404(db, board.id)


@router.get("/{board_id}", response_model=BoardOut)
async def get_board(board_id: str, db: Session = Depends(get_db)):
    return _board_or_404(db, board_id)


@router.put("/{board_id}", response_model=BoardOut)
async def update_board(board_id: str, board_data: BoardUpdate, db: Session = Depends(get_db)):
    board = get_or_raise(db, Board, board_id)

    update_data = board_data.model_dump(exclude_unset=True)
    for field in ("title", "background"):
        if update_data.get(field):
            setattr(board, field, update_data[field])
    if "description" in update_data:
        board.description = update_data["description"]

    db.commit()
    return _board_or_404(db, board_id)


@router.delete("/{board_id}", response_model=SuccessResponse)
async def delete_board(
    board_id: str,
    x_admin_password: Optional[str] = Header(default=None),
    x_admin_session: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
):
    """Delete a board and everything under it. Admin only."""
    ensure_admin(x_admin_password, x_admin_session)

    board = db.get(Board, board_id)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    db.delete(board)
    db.commit()
    logger.info("Deleted board %s", board_id)
    return SuccessResponse()


@router.post("/{board_id}/access", response_model=SuccessResponse)
async def validate_board_access(board_id: str, access_data: BoardAccessRequest, db: Session = Depends(get_db)):
    """Check a board's access code.

    A match only tells the caller the code was right; the client decides what
    to remember. When an email is supplied the validation is recorded for
    auditing.
    """
    if not access_data.access_code:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Access code is required")

    board = db.get(Board, board_id)
    if not board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    stored = board.access_code or ""
    if not stored or not secrets.compare_digest(stored.encode("utf-8"), access_data.access_code.encode("utf-8")):
        logger.info("Invalid access code for board %s", board_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid access code")

    if access_data.email:
        email = access_data.email.strip().lower()
        record = (
            db.query(BoardAccess)
            .filter(BoardAccess.board_id == board.id, BoardAccess.email == email)
            .first()
        )
        if record is None:
            db.add(BoardAccess(board_id=board.id, email=email))
        else:
            record.accessed_at = utcnow()
        db.commit()

    return SuccessResponse()
