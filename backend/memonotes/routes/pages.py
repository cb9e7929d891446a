"""
MemoNotes Backend — Static Pages
==================================

What:  Plain-text liveness response at / and the HTML upload form.
How:   The form is a static file shipped inside the package (memonotes/static)
       and posts multipart data to POST /write.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
UPLOAD_FORM = STATIC_DIR / "UploadForm.html"

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness text")
async def index() -> str:
    return "Server is running"


@router.get(
    "/UploadForm.html",
    response_class=FileResponse,
    summary="HTML form for creating a note",
)
async def upload_form() -> FileResponse:
    return FileResponse(path=str(UPLOAD_FORM), media_type="text/html")
