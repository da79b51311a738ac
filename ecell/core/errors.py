"""Erros da aplicação.

Cada erro carrega um código, uma mensagem segura para o cliente e o status
HTTP correspondente. Os handlers em ``ecell.main`` convertem para
``{"success": false, "message": ...}``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"


class AppError(Exception):
    status_code: int = 500
    code: ErrorCode = ErrorCode.STORAGE_ERROR

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_body(self) -> dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationError(AppError):
    """Entrada malformada; nunca chega ao banco."""

    status_code = 400
    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        if self.errors:
            body["errors"] = self.errors
        return body

    @classmethod
    def from_pydantic(cls, errors: list[dict[str, Any]]) -> "ValidationError":
        """Monta a mensagem campo a campo a partir de ``exc.errors()``."""
        fields = []
        for err in errors:
            # descarta "body"/"form" do loc do FastAPI
            loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "form", "query", "path")]
            fields.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
        summary = "; ".join(f"{f['field']}: {f['message']}" for f in fields)
        return cls(f"Invalid input - {summary}" if summary else "Invalid input", fields)


class AuthenticationError(AppError):
    status_code = 401
    code = ErrorCode.AUTHENTICATION_REQUIRED


class NotFoundError(AppError):
    status_code = 404
    code = ErrorCode.NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity_id = entity_id


class StorageError(AppError):
    """Falha no banco ou no object storage. O detalhe fica só no log."""

    status_code = 500
    code = ErrorCode.STORAGE_ERROR

    def __init__(self, detail: str, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.detail = detail
