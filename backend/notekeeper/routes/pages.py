"""
NoteKeeper Backend: Page Routes
=================================

What:  GET / (redirect) and GET /UploadForm.html (the note creation form).
Why:   Lets a browser user create notes without an HTTP client.
How:   Serves UploadForm.html from settings.public_dir; the form POSTs
       `note_name` and `note` to /write.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, RedirectResponse

from notekeeper.exceptions import NotFoundError

UPLOAD_FORM = "UploadForm.html"

router = APIRouter(tags=["Pages"])


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse(url=f"/{UPLOAD_FORM}")


@router.get(
    f"/{UPLOAD_FORM}",
    response_class=FileResponse,
    responses={200: {"content": {"text/html": {}}}},
    summary="HTML form for creating notes",
)
async def upload_form(request: Request) -> FileResponse:
    public_dir = Path(request.app.state.settings.public_dir)
    form_path = public_dir / UPLOAD_FORM
    if not form_path.is_file():
        raise NotFoundError(resource="page", resource_id=UPLOAD_FORM)

    return FileResponse(path=str(form_path), media_type="text/html")
