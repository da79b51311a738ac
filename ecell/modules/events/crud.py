# ecell/modules/events/crud.py
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.errors import NotFoundError
from .models import Event
from .schemas import EventCreate, EventUpdate, enforce_status_fields


async def get_event_or_404(db: AsyncSession, event_id: str) -> Event:
    res = await db.execute(select(Event).where(Event.id == event_id))
    event = res.scalar_one_or_none()
    if not event:
        raise NotFoundError("Event", event_id)
    return event


async def create_event(db: AsyncSession, payload: EventCreate, strict: bool = False) -> Event:
    if strict:
        enforce_status_fields(payload.status, payload.registration_link, payload.summary)
    # sem None: image cai no default do modelo
    obj = Event(**payload.model_dump(exclude_none=True))
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


async def list_events(db: AsyncSession) -> Sequence[Event]:
    res = await db.execute(select(Event).order_by(Event.date.desc(), Event.created_at.desc()))
    return res.scalars().all()


async def update_event(db: AsyncSession, event_id: str, payload: EventUpdate, strict: bool = False) -> Event:
    event = await get_event_or_404(db, event_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(event, k, v)

    if strict:
        # valida o registro já mesclado
        enforce_status_fields(event.status, event.registration_link, event.summary)

    await db.commit()
    await db.refresh(event)
    return event


async def delete_event(db: AsyncSession, event_id: str) -> None:
    event = await get_event_or_404(db, event_id)
    await db.delete(event)
    await db.commit()
