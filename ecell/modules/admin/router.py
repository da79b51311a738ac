import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.dependencies import get_admin_sessions, get_bearer_token, get_db, require_admin
from ecell.core.errors import AuthenticationError
from ecell.core.schemas import SuccessOut
from ecell.core.security import AdminSessionManager
from ecell.modules.contact import crud as contact_crud
from ecell.modules.contact.schemas import ContactSubmissionOut, DashboardOut
from .schemas import AdminLoginIn, AdminStatusOut, LoginOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginOut)
async def admin_login(
    payload: AdminLoginIn,
    sessions: AdminSessionManager = Depends(get_admin_sessions),
):
    try:
        token = sessions.login(payload.password)
    except AuthenticationError:
        logger.warning("Admin login rejected")
        raise
    logger.info("Admin login ok (%d active sessions)", sessions.active_count)
    return LoginOut(token=token)


@router.post("/logout", response_model=SuccessOut)
async def admin_logout(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: AdminSessionManager = Depends(get_admin_sessions),
):
    # idempotente: token ausente ou já inválido também é sucesso
    sessions.logout(token)
    return SuccessOut(message="Logout successful")


@router.get("/status", response_model=AdminStatusOut, dependencies=[Depends(require_admin)])
async def admin_status():
    return AdminStatusOut()


@router.get("/dashboard", response_model=DashboardOut, dependencies=[Depends(require_admin)])
async def admin_dashboard(db: AsyncSession = Depends(get_db)):
    stats = await contact_crud.get_submission_stats(db)
    return DashboardOut(
        total_submissions=stats["total_submissions"],
        recent_submissions=stats["recent_submissions"],
        submissions=[ContactSubmissionOut.model_validate(s) for s in stats["submissions"]],
    )
