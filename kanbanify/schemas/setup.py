"""Schemas for the database status endpoint"""
from kanbanify.schemas.common import CamelModel


class DatabaseStats(CamelModel):
    boards: int
    lists: int
    cards: int


class DatabaseStatus(CamelModel):
    success: bool
    message: str
    stats: DatabaseStats
