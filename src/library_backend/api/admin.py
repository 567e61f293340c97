"""Admin API endpoints with simple token auth."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from library_backend.api.dependencies import get_container
from library_backend.api.schemas import serialize_audit_record, serialize_summary
from library_backend.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(container: AppContainer = Depends(get_container)) -> str:
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/summary", dependencies=[Depends(require_admin)])
async def library_summary(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return counts of books, copies, readers and rentals."""
    return serialize_summary(container.summary_service.summarize())


@router.get("/rental-audits", dependencies=[Depends(require_admin)])
async def recent_rental_audits(
    limit: int = Query(default=50, ge=1, le=500),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the latest rental audit records across all rentals."""
    records = container.rental_auditor.recent(limit)
    return {"records": [serialize_audit_record(record) for record in records]}


@router.get("/ui", response_class=HTMLResponse)
async def admin_ui() -> HTMLResponse:
    """Minimal admin UI that consumes the admin API."""
    return HTMLResponse(_ADMIN_UI_HTML)


_ADMIN_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Library Admin</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Library Admin</h1>
    <div class="row">
      <label>Admin token</label><br />
      <input id="token" type="password" placeholder="X-Admin-Token" />
    </div>
    <div class="row">
      <button onclick="loadEndpoint('/admin/summary')">Summary</button>
      <button onclick="loadEndpoint('/admin/rental-audits')">Rental audits</button>
    </div>
    <pre id="output">Ready.</pre>
    <script>
      async function loadEndpoint(path) {
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, {
          headers: { 'X-Admin-Token': document.getElementById('token').value }
        });
        if (!res.ok) {
          output.textContent = 'Error: ' + res.status;
          return;
        }
        output.textContent = JSON.stringify(await res.json(), null, 2);
      }
    </script>
  </body>
</html>
"""
