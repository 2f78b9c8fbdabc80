"""Admin authentication.

The admin gate is a single shared password taken from ``ADMIN_PASSWORD``.
There is no session, rate limiting or lockout; clients remember a successful
login as an unsigned local flag and send it back in ``x-admin-session``.
"""
import logging
import secrets
from typing import Optional

from fastapi import HTTPException, status

from kanbanify.config import settings

logger = logging.getLogger(__name__)

ADMIN_REQUIRED_MESSAGE = "Admin authentication required to delete boards"


def check_admin_password(password: Optional[str]) -> bool:
    expected = settings.ADMIN_PASSWORD
    if not expected or not isinstance(password, str):
        return False
    return secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))


def has_admin_headers(admin_password: Optional[str], admin_session: Optional[str]) -> bool:
    if admin_session == "true":
        return True
    return check_admin_password(admin_password)


def ensure_admin(admin_password: Optional[str], admin_session: Optional[str]) -> None:
    if not has_admin_headers(admin_password, admin_session):
        logger.warning("Rejected admin-only request without valid admin headers")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ADMIN_REQUIRED_MESSAGE)
