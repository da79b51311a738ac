# ecell/modules/team/crud.py
import logging
import os
import re
import time
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.errors import NotFoundError, StorageError
from ecell.integrations.supabase_storage import SupabaseStorage
from .models import TeamMember
from .schemas import TeamMemberCreate, TeamMemberUpdate

logger = logging.getLogger(__name__)


def photo_object_name(filename: str) -> str:
    """<epoch-ms>-<nome original saneado>, ex.: 1718000000000-jo-smith.png"""
    base, ext = os.path.splitext(os.path.basename(filename))
    safe = re.sub(r"[^A-Za-z0-9._-]+", "-", base).strip("-.") or "photo"
    return f"{int(time.time() * 1000)}-{safe}{ext.lower()}"


async def get_member_or_404(db: AsyncSession, member_id: str) -> TeamMember:
    res = await db.execute(select(TeamMember).where(TeamMember.id == member_id))
    member = res.scalar_one_or_none()
    if not member:
        raise NotFoundError("Team member", member_id)
    return member


async def create_member(
    db: AsyncSession,
    storage: SupabaseStorage,
    payload: TeamMemberCreate,
    photo: bytes,
    filename: str,
    content_type: str,
) -> TeamMember:
    # 1) sobe a foto; se falhar, nada é inserido
    image_url = await storage.upload(photo_object_name(filename), photo, content_type)

    # 2) insere a linha com a URL. Se o insert falhar, o blob fica órfão.
    member = TeamMember(**payload.model_dump(), image_url=image_url)
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member


async def list_members(db: AsyncSession, featured_only: bool = False) -> Sequence[TeamMember]:
    stmt = select(TeamMember)
    if featured_only:
        stmt = stmt.where(TeamMember.is_featured.is_(True))
    stmt = stmt.order_by(TeamMember.display_order.asc(), TeamMember.created_at.asc())
    res = await db.execute(stmt)
    return res.scalars().all()


async def update_member(db: AsyncSession, member_id: str, payload: TeamMemberUpdate) -> TeamMember:
    member = await get_member_or_404(db, member_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(member, k, v)

    await db.commit()
    await db.refresh(member)
    return member


async def delete_member(db: AsyncSession, storage: SupabaseStorage, member_id: str) -> None:
    member = await get_member_or_404(db, member_id)
    image_url = member.image_url

    await db.delete(member)
    await db.commit()

    # só remove fotos do nosso bucket que nenhum outro membro ainda usa
    if not image_url.startswith(storage.public_url("")):
        logger.info("Photo of team member %s is outside the bucket; not removing %s", member_id, image_url)
        return
    res = await db.execute(select(func.count()).select_from(TeamMember).where(TeamMember.image_url == image_url))
    if res.scalar_one():
        logger.info("Photo %s still used by another team member; not removing", image_url)
        return

    # remoção do blob é melhor esforço: a exclusão já foi confirmada
    object_name = SupabaseStorage.object_name_from_url(image_url)
    try:
        await storage.remove(object_name)
    except StorageError as exc:
        logger.warning("Could not remove photo %r of team member %s: %s", object_name, member_id, exc.detail)
