"""
Card Model
"""
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class CardPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CardStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Card(Base):
    __tablename__ = "cards"

    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    position = Column(Integer, default=1000, nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    priority = Column(SQLEnum(CardPriority), default=CardPriority.MEDIUM, nullable=False)
    status = Column(SQLEnum(CardStatus), default=CardStatus.ACTIVE, nullable=False)
    list_id = Column(String(32), ForeignKey("lists.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    list = relationship("BoardList", back_populates="cards")
    assignees = relationship(
        "CardAssignment",
        back_populates="card",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CardAssignment.assigned_at",
    )
    labels = relationship("CardLabel", back_populates="card", cascade="all, delete-orphan", passive_deletes=True)
    checklist = relationship(
        "ChecklistItem",
        back_populates="card",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[ChecklistItem.position, ChecklistItem.created_at, ChecklistItem.id]",
    )
