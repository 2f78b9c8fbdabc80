"""Team member endpoints"""
import random
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from kanbanify.database import get_db
from kanbanify.models import Board, TeamMember
from kanbanify.queries import get_or_raise, team_member_query
from kanbanify.schemas import SuccessResponse, TeamMemberCreate, TeamMemberOut, TeamMemberUpdate

router = APIRouter()

# Predefined avatar colors
AVATAR_COLORS = (
    "#ef4444", "#f97316", "#f59e0b", "#eab308", "#84cc16",
    "#22c55e", "#10b981", "#14b8a6", "#06b6d4", "#0ea5e9",
    "#3b82f6", "#6366f1", "#8b5cf6", "#a855f7", "#d946ef",
)


@router.get("", response_model=List[TeamMemberOut])
async def list_team_members(board_id: Optional[str] = Query(default=None, alias="boardId"), db: Session = Depends(get_db)):
    if not board_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Board ID is required")

    return (
        team_member_query(db)
        .filter(TeamMember.board_id == board_id)
        .order_by(TeamMember.created_at.asc())
        .all()
    )


@router.post("", response_model=TeamMemberOut, status_code=status.HTTP_201_CREATED)
async def create_team_member(member_data: TeamMemberCreate, db: Session = Depends(get_db)):
    """Add a member to a board, picking an avatar color when none is given."""
    name = (member_data.name or "").strip()
    if not name or not member_data.board_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name and board ID are required")

    if db.get(Board, member_data.board_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Board not found")

    member = TeamMember(
        name=name,
        board_id=member_data.board_id,
        color=member_data.color or random.choice(AVATAR_COLORS),
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


@router.put("/{member_id}", response_model=TeamMemberOut)
async def update_team_member(member_id: str, member_data: TeamMemberUpdate, db: Session = Depends(get_db)):
    member = get_or_raise(db, TeamMember, member_id)

    if member_data.name:
        member.name = member_data.name.strip()
    if member_data.color:
        member.color = member_data.color

    db.commit()
    db.refresh(member)
    return member


@router.delete("/{member_id}", response_model=SuccessResponse)
async def delete_team_member(member_id: str, db: Session = Depends(get_db)):
    member = get_or_raise(db, TeamMember, member_id)
    db.delete(member)
    db.commit()
    return SuccessResponse()
