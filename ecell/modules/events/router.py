import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.config import settings
from ecell.core.dependencies import get_db, require_admin
from ecell.core.schemas import SuccessOut
from . import crud
from .schemas import EventCreate, EventEnvelope, EventOut, EventUpdate

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(require_admin)])


def _strict() -> bool:
    return settings.EVENT_STATUS_POLICY == "strict"


@router.get("/events", response_model=list[EventOut])
async def list_events(db: AsyncSession = Depends(get_db)):
    return await crud.list_events(db)


@admin_router.post("/events", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
async def create_event(payload: EventCreate, db: AsyncSession = Depends(get_db)):
    event = await crud.create_event(db, payload, strict=_strict())
    logger.info("Event %s created (%s)", event.id, event.status)
    return EventEnvelope(event=EventOut.model_validate(event))


@admin_router.put("/events/{event_id}", response_model=EventEnvelope)
async def update_event(event_id: str, payload: EventUpdate, db: AsyncSession = Depends(get_db)):
    event = await crud.update_event(db, event_id, payload, strict=_strict())
    return EventEnvelope(event=EventOut.model_validate(event))


@admin_router.delete("/events/{event_id}", response_model=SuccessOut)
async def delete_event(event_id: str, db: AsyncSession = Depends(get_db)):
    await crud.delete_event(db, event_id)
    logger.info("Event %s deleted", event_id)
    return SuccessOut(message="Event deleted")
