import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.config import settings
from ecell.core.dependencies import get_db, get_storage, require_admin
from ecell.core.errors import ValidationError
from ecell.core.schemas import SuccessOut
from ecell.integrations.supabase_storage import SupabaseStorage
from . import crud
from .schemas import MemberEnvelope, TeamMemberCreate, TeamMemberOut, TeamMemberUpdate, validate_photo

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/team", response_model=list[TeamMemberOut])
async def list_team(db: AsyncSession = Depends(get_db)):
    return await crud.list_members(db)


@router.get("/team/featured", response_model=list[TeamMemberOut])
async def list_featured_team(db: AsyncSession = Depends(get_db)):
    return await crud.list_members(db, featured_only=True)


@admin_router.get("/team", response_model=list[TeamMemberOut])
async def admin_list_team(db: AsyncSession = Depends(get_db)):
    return await crud.list_members(db)


@admin_router.post("/team", response_model=MemberEnvelope, status_code=status.HTTP_201_CREATED)
async def create_member(
    name: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    instagram: Optional[str] = Form(None),
    linkedin: Optional[str] = Form(None),
    is_featured: Optional[str] = Form(None, alias="isFeatured"),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    photo: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
    storage: SupabaseStorage = Depends(get_storage),
):
    # multipart chega como texto; o schema faz a coerção (bool/int)
    raw = {
        "name": name,
        "role": role,
        "instagram": instagram,
        "linkedin": linkedin,
        "isFeatured": is_featured or None,
        "displayOrder": display_order or None,
    }
    try:
        payload = TeamMemberCreate.model_validate({k: v for k, v in raw.items() if v is not None})
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc.errors()) from exc

    if photo is None or not photo.filename:
        raise ValidationError("A photo is required", [{"field": "photo", "message": "Field required"}])

    content = await photo.read()
    validate_photo(photo.filename, photo.content_type, len(content), settings.MAX_PHOTO_BYTES)

    member = await crud.create_member(db, storage, payload, content, photo.filename, photo.content_type)
    logger.info("Team member %s created (%s)", member.id, member.image_url)
    return MemberEnvelope(member=TeamMemberOut.model_validate(member))


@admin_router.put("/team/{member_id}", response_model=MemberEnvelope)
async def update_member(member_id: str, payload: TeamMemberUpdate, db: AsyncSession = Depends(get_db)):
    member = await crud.update_member(db, member_id, payload)
    return MemberEnvelope(member=TeamMemberOut.model_validate(member))


@admin_router.delete("/team/{member_id}", response_model=SuccessOut)
async def delete_member(
    member_id: str,
    db: AsyncSession = Depends(get_db),
    storage: SupabaseStorage = Depends(get_storage),
):
    await crud.delete_member(db, storage, member_id)
    logger.info("Team member %s deleted", member_id)
    return SuccessOut(message="Team member deleted")
