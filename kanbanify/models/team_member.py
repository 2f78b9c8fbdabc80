"""
Team Member Model
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    color = Column(String(32), nullable=False)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    board = relationship("Board", back_populates="members")
    cards = relationship("CardAssignment", back_populates="team_member", cascade="all, delete-orphan", passive_deletes=True)
