import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecell.core.dependencies import get_db, get_notifier, require_admin
from ecell.core.schemas import SuccessOut
from ecell.integrations.sendgrid_client import ContactNotifier
from . import crud
from .schemas import ContactCreatedOut, ContactSubmissionCreate, ContactSubmissionOut

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter(dependencies=[Depends(require_admin)])

THANK_YOU = "Thank you for your message! We'll get back to you within 24 hours."


@router.post("/contact", response_model=ContactCreatedOut, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    payload: ContactSubmissionCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    notifier: ContactNotifier = Depends(get_notifier),
):
    submission = await crud.create_submission(db, payload)
    logger.info("Contact submission %s received", submission.id)

    # e-mail depois da resposta; falha não afeta o envio
    background_tasks.add_task(
        notifier.send_contact_notification,
        name=submission.name,
        email=submission.email,
        message=submission.message,
        submitted_at=submission.created_at,
    )
    return ContactCreatedOut(message=THANK_YOU, id=submission.id)


@admin_router.get("/submissions", response_model=list[ContactSubmissionOut])
async def list_submissions(db: AsyncSession = Depends(get_db)):
    return await crud.list_submissions(db)


@admin_router.delete("/submissions/{submission_id}", response_model=SuccessOut)
async def delete_submission(submission_id: str, db: AsyncSession = Depends(get_db)):
    await crud.delete_submission(db, submission_id)
    return SuccessOut(message="Submission deleted")
