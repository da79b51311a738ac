import os
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, model_validator

from ecell.core.errors import ValidationError
from ecell.core.schemas import CamelModel, InputModel

ALLOWED_PHOTO_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

_OPTIONAL_LINKS = frozenset({"instagram", "linkedin"})

# display_order é INTEGER (int32) no Postgres
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1


class TeamMemberCreate(InputModel):
    BLANK_TO_NONE: ClassVar[frozenset[str]] = _OPTIONAL_LINKS

    name: str = Field(min_length=2, max_length=200)
    role: str = Field(min_length=1, max_length=120)
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    is_featured: bool = False
    display_order: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)


class TeamMemberUpdate(InputModel):
    BLANK_TO_NONE: ClassVar[frozenset[str]] = _OPTIONAL_LINKS

    name: Optional[str] = Field(default=None, min_length=2, max_length=200)
    role: Optional[str] = Field(default=None, min_length=1, max_length=120)
    image_url: Optional[str] = Field(default=None, min_length=1)
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)

    @model_validator(mode="after")
    def required_not_null(self):
        self.reject_nulls("name", "role", "image_url", "is_featured", "display_order")
        return self


class TeamMemberOut(CamelModel):
    id: str
    name: str
    role: str
    image_url: str
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    is_featured: bool
    display_order: int
    created_at: datetime


class MemberEnvelope(CamelModel):
    success: bool = True
    member: TeamMemberOut


def validate_photo(filename: Optional[str], content_type: Optional[str], size: int, max_bytes: int) -> None:
    """Confere extensão, content-type e tamanho da foto enviada."""
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in ALLOWED_PHOTO_EXTENSIONS:
        raise ValidationError(
            f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_PHOTO_EXTENSIONS))}",
            [{"field": "photo", "message": "Unsupported file extension"}],
        )
    if not content_type or not content_type.startswith("image/"):
        raise ValidationError("File must be an image", [{"field": "photo", "message": "Not an image"}])
    if size == 0:
        raise ValidationError("Photo is empty", [{"field": "photo", "message": "Empty file"}])
    if size > max_bytes:
        raise ValidationError(
            f"File size exceeds maximum allowed size of {max_bytes / 1024 / 1024:g}MB",
            [{"field": "photo", "message": "File too large"}],
        )
