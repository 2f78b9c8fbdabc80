"""Schemas for board labels"""
from typing import Optional

from kanbanify.schemas.common import CamelModel


class LabelCreate(CamelModel):
    name: Optional[str] = None
    color: Optional[str] = None
    board_id: Optional[str] = None


class LabelUpdate(CamelModel):
    name: Optional[str] = None
    color: Optional[str] = None


class LabelOut(CamelModel):
    id: str
    name: str
    color: str
    board_id: str


class CardLabelCreate(CamelModel):
    label_id: Optional[str] = None


class CardLabelOut(CamelModel):
    card_id: str
    label_id: str
    label: Optional[LabelOut] = None
