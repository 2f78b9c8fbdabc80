"""Admin login endpoint"""
import logging

from fastapi import APIRouter, HTTPException, status

from kanbanify.auth import check_admin_password
from kanbanify.schemas import AdminLoginRequest, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=SuccessResponse)
async def admin_login(login_data: AdminLoginRequest):
    """Check the shared admin password. No session is issued."""
    if not login_data.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Password is required")

    try:
        valid = check_admin_password(login_data.password)
    except Exception:
        logger.exception("Admin login failed unexpectedly")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed")

    if not valid:
        logger.warning("Invalid admin password attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin password")

    return SuccessResponse()
