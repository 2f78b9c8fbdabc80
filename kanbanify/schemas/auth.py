"""Schemas for admin authentication"""
from typing import Optional

from kanbanify.schemas.common import CamelModel


class AdminLoginRequest(CamelModel):
    password: Optional[str] = None
