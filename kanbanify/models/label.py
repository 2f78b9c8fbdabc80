"""
Label Models
"""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from kanbanify.database import Base


class Label(Base):
    __tablename__ = "labels"

    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    color = Column(String(32), nullable=False)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    board = relationship("Board", back_populates="labels")
    cards = relationship("CardLabel", back_populates="label", cascade="all, delete-orphan", passive_deletes=True)


class CardLabel(Base):
    __tablename__ = "card_labels"

    card_id = Column(String(32), ForeignKey("cards.id", ondelete="CASCADE"), primary_key=True)
    label_id = Column(String(32), ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True)

    # Relationships
    card = relationship("Card", back_populates="labels")
    label = relationship("Label", back_populates="cards")
