"""
Board Model
"""
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(32), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    background = Column(String(32), default="#0079bf", nullable=False)
    access_code = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    lists = relationship(
        "BoardList",
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[BoardList.position, BoardList.created_at, BoardList.id]",
    )
    members = relationship(
        "TeamMember",
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TeamMember.created_at",
    )
    labels = relationship("Label", back_populates="board", cascade="all, delete-orphan", passive_deletes=True)
    access_records = relationship("BoardAccess", back_populates="board", cascade="all, delete-orphan", passive_deletes=True)
