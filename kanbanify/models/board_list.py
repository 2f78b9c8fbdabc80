"""
List Model

A column of cards inside a board. Named ``BoardList`` to stay clear of the
``typing.List`` builtin alias used throughout the schemas.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class BoardList(Base):
    __tablename__ = "lists"

    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    position = Column(Integer, default=1000, nullable=False)
    color = Column(String(32), nullable=True)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    board = relationship("Board", back_populates="lists")
    cards = relationship(
        "Card",
        back_populates="list",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Card.position, Card.created_at, Card.id]",
    )
