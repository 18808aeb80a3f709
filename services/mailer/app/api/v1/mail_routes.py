"""Routes for sending event mails."""

from typing import Any

from fastapi import APIRouter, BackgroundTasks, Depends, Header, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import EmailStr

from app.core.config import Settings
from app.core.exceptions import CredentialEncodingError, DeliveryError
from app.dependencies import get_audience_service, get_config, get_dispatch_service
from app.models import Resolved, UpstreamFailed
from app.schemas import BatchMailRequest, MailRequest
from app.services import AudienceService, DispatchService

router = APIRouter(tags=["mail"])


@router.get("/")
async def health_check() -> dict[str, str]:
    return {"status": "Health check succeeded."}


@router.post("/sendMail")
async def send_mail(
    payload: BatchMailRequest,
    background_tasks: BackgroundTasks,
    x_access_token: str = Header(...),
    audience_service: AudienceService = Depends(get_audience_service),
    dispatch_service: DispatchService = Depends(get_dispatch_service),
    config: Settings = Depends(get_config),
) -> Any:
    """Mail every participant matching the audience filter.

    The response only reports how many participants were found; delivery
    happens after it has been sent.
    """

    context = payload.event_context()
    resolution = await run_in_threadpool(audience_service.resolve, context, x_access_token)

    if isinstance(resolution, UpstreamFailed) and not config.REGISTRY_ERRORS_AS_EMPTY:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"status": "RegistryUnavailable", "err": resolution.detail},
        )

    if not isinstance(resolution, Resolved):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "EmptyParticipants", "err": "Participant list is empty"},
        )

    background_tasks.add_task(
        dispatch_service.send_batch,
        resolution.recipients,
        context.event_name,
        payload.mail_subject,
        payload.mail_body,
        payload.is_markdown,
    )
    return {"status": "success", "err": None, "participants": len(resolution.recipients)}


@router.post("/sendMail/{custom_email}")
async def send_custom_mail(
    custom_email: EmailStr,
    payload: MailRequest,
    dispatch_service: DispatchService = Depends(get_dispatch_service),
) -> Any:
    """Mail a single address outside of the registry audience."""

    try:
        await run_in_threadpool(
            dispatch_service.send_direct,
            str(custom_email),
            payload.event_name,
            payload.mail_subject,
            payload.mail_body,
            payload.is_markdown,
        )
    except CredentialEncodingError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "CredentialNotGenerated", "err": str(exc)},
        )
    except DeliveryError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "MailNotSent", "err": exc.to_dict()},
        )

    return {"status": "success", "err": None}


__all__ = ["router"]
