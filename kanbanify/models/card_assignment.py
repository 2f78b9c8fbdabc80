"""Card assignment model"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class CardAssignment(Base):
    __tablename__ = "card_assignments"

    card_id = Column(String(32), ForeignKey("cards.id", ondelete="CASCADE"), primary_key=True)
    team_member_id = Column(String(32), ForeignKey("team_members.id", ondelete="CASCADE"), primary_key=True)
    assigned_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    card = relationship("Card", back_populates="assignees")
    team_member = relationship("TeamMember", back_populates="cards")
