from datetime import datetime

from pydantic import EmailStr, Field

from ecell.core.schemas import CamelModel, InputModel


class ContactSubmissionCreate(InputModel):
    name: str = Field(min_length=2, max_length=200)
    email: EmailStr
    message: str = Field(min_length=10, max_length=5000)


class ContactSubmissionOut(CamelModel):
    id: str
    name: str
    email: str
    message: str
    created_at: datetime


class ContactCreatedOut(CamelModel):
    success: bool = True
    message: str
    id: str


class DashboardOut(CamelModel):
    success: bool = True
    total_submissions: int
    recent_submissions: int
    submissions: list[ContactSubmissionOut]
