# ecell/modules/contact/crud.py
from datetime import timedelta
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.errors import NotFoundError
from ecell.db.base import utcnow
from .models import ContactSubmission
from .schemas import ContactSubmissionCreate

RECENT_WINDOW = timedelta(days=7)
DASHBOARD_LATEST = 10


async def create_submission(db: AsyncSession, data: ContactSubmissionCreate) -> ContactSubmission:
    obj = ContactSubmission(**data.model_dump())
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


async def list_submissions(db: AsyncSession, limit: int | None = None) -> Sequence[ContactSubmission]:
    stmt = select(ContactSubmission).order_by(ContactSubmission.created_at.desc())
    if limit is not None:
        stmt = stmt.limit(limit)
    res = await db.execute(stmt)
    return res.scalars().all()


async def delete_submission(db: AsyncSession, submission_id: str) -> None:
    res = await db.execute(delete(ContactSubmission).where(ContactSubmission.id == submission_id))
    if res.rowcount == 0:
        await db.rollback()
        raise NotFoundError("Submission", submission_id)
    await db.commit()


async def get_submission_stats(db: AsyncSession) -> dict:
    total = (await db.execute(select(func.count()).select_from(ContactSubmission))).scalar_one()
    since = utcnow() - RECENT_WINDOW
    recent = (
        await db.execute(
            select(func.count()).select_from(ContactSubmission).where(ContactSubmission.created_at > since)
        )
    ).scalar_one()
    latest = await list_submissions(db, limit=DASHBOARD_LATEST)
    return {
        "total_submissions": int(total),
        "recent_submissions": int(recent),
        "submissions": latest,
    }
