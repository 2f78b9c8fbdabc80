"""Checklist item model"""
from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(String(32), primary_key=True, index=True)
    content = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    card_id = Column(String(32), ForeignKey("cards.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, default=1000, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    card = relationship("Card", back_populates="checklist")
