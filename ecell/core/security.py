# ecell/core/security.py
import logging
import secrets
import threading
from typing import Optional

from ecell.core.config import settings
from ecell.core.errors import AuthenticationError, ErrorCode

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32  # 256 bits


class AdminSessionManager:
    """Sessões de admin: um conjunto em memória de tokens ativos.

    Não há expiração. Um token vale até o logout ou até o processo reiniciar.
    """

    def __init__(self, password: str):
        self._password = password
        self._tokens: set[str] = set()
        self._lock = threading.Lock()

    def login(self, password: str) -> str:
        if not secrets.compare_digest(password.encode(), self._password.encode()):
            raise AuthenticationError("Invalid password", code=ErrorCode.INVALID_CREDENTIALS)
        token = secrets.token_hex(TOKEN_BYTES)
        with self._lock:
            self._tokens.add(token)
        return token

    def authenticate(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            return token in self._tokens

    def logout(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._tokens.discard(token)

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._tokens)


admin_sessions = AdminSessionManager(settings.ADMIN_PASSWORD)
