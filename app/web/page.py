# app/web/page.py

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

TEMPLATE_PATH = Path(__file__).parent / "templates" / "index.html"


@router.get("/", response_class=HTMLResponse)
def users_page() -> HTMLResponse:
    """
    Client-rendered users page; the browser calls /api/users itself.
    """
    return HTMLResponse(TEMPLATE_PATH.read_text(encoding="utf-8"))
