"""
Board Access Model

Audit trail of who validated a board's access code. Not consulted for
authorization decisions.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from kanbanify.database import Base, utcnow


class BoardAccess(Base):
    __tablename__ = "board_access"

    id = Column(String(32), primary_key=True, index=True)
    board_id = Column(String(32), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    accessed_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    board = relationship("Board", back_populates="access_records")

    __table_args__ = (
        UniqueConstraint("board_id", "email", name="unique_board_access_email"),
    )
