from datetime import datetime
from typing import ClassVar, Literal, Optional

from pydantic import Field, model_validator

from ecell.core.errors import ValidationError
from ecell.core.schemas import CamelModel, InputModel

EventStatus = Literal["upcoming", "past"]

_OPTIONAL_TEXT = frozenset({"registration_link", "summary", "image"})


class EventCreate(InputModel):
    BLANK_TO_NONE: ClassVar[frozenset[str]] = _OPTIONAL_TEXT

    title: str = Field(min_length=1, max_length=200)
    date: datetime
    description: str = Field(min_length=1)
    status: EventStatus
    registration_link: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None


class EventUpdate(InputModel):
    BLANK_TO_NONE: ClassVar[frozenset[str]] = _OPTIONAL_TEXT

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    date: Optional[datetime] = None
    description: Optional[str] = Field(default=None, min_length=1)
    status: Optional[EventStatus] = None
    registration_link: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None

    @model_validator(mode="after")
    def required_not_null(self):
        self.reject_nulls("title", "date", "description", "status")
        return self


class EventOut(CamelModel):
    id: str
    title: str
    date: datetime
    description: str
    status: EventStatus
    registration_link: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime


class EventEnvelope(CamelModel):
    success: bool = True
    event: EventOut


def enforce_status_fields(status: str, registration_link: Optional[str], summary: Optional[str]) -> None:
    """Política estrita: upcoming exige link de inscrição, past exige resumo."""
    if status == "upcoming" and not registration_link:
        raise ValidationError(
            "Upcoming events require a registration link",
            [{"field": "registrationLink", "message": "Required when status is upcoming"}],
        )
    if status == "past" and not summary:
        raise ValidationError(
            "Past events require a summary",
            [{"field": "summary", "message": "Required when status is past"}],
        )
