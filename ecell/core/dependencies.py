from typing import AsyncIterator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.config import settings
from ecell.core.errors import AuthenticationError
from ecell.core.security import AdminSessionManager, admin_sessions
from ecell.db.session import AsyncSessionLocal
from ecell.integrations.sendgrid_client import ContactNotifier
from ecell.integrations.supabase_storage import SupabaseStorage

bearer_scheme = HTTPBearer(auto_error=False)  # 401 é nosso, não o 403 padrão


async def get_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session


def get_admin_sessions() -> AdminSessionManager:
    return admin_sessions


def get_storage() -> SupabaseStorage:
    return SupabaseStorage(
        settings.SUPABASE_PROJECT_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        bucket=settings.SUPABASE_BUCKET,
    )


def get_notifier() -> ContactNotifier:
    return ContactNotifier(
        settings.SENDGRID_API_KEY,
        settings.SENDGRID_FROM_EMAIL,
        settings.SENDGRID_TO_EMAIL,
    )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: AdminSessionManager = Depends(get_admin_sessions),
) -> str:
    # mesma resposta para token ausente, desconhecido ou já deslogado
    if not sessions.authenticate(token):
        raise AuthenticationError("Authentication required")
    return token
