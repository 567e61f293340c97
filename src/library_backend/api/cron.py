"""Endpoints invoked by the deployment's cron scheduler."""

from fastapi import APIRouter, Depends, Header, HTTPException, status

from library_backend.api.dependencies import get_container
from library_backend.containers import AppContainer

router = APIRouter(prefix="/cron", tags=["cron"])


def require_cron_secret(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> None:
    """Accept only calls carrying ``Authorization: Bearer <CRON_SECRET>``."""
    expected = f"Bearer {container.settings.cron_secret}"
    if authorization != expected:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/weekly-summary", dependencies=[Depends(require_cron_secret)])
def weekly_summary(
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Send the weekly summary email to the administrator."""
    mail = container.weekly_summary_job.run()
    return {"status": "sent", "mail_to": mail.mail_to}
