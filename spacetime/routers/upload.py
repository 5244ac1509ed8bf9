from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from pathlib import Path
from starlette.datastructures import UploadFile
from spacetime.config import settings
from spacetime.exceptions import UploadRejectedError
from spacetime.schemas.upload import UploadOut
from spacetime.services.upload_service import (
    build_filename,
    exceeds_upload_limit,
    is_valid_media_type,
    save_upload,
)

router = APIRouter(tags=["Upload"])


@router.post("/upload", response_model=UploadOut)
async def upload_file(request: Request):
    """Store an image or video and return the URL it is served from.

    The file may be sent under any multipart field name; the first file part is used.
    """
    if exceeds_upload_limit(request.headers.get("content-length"), settings.MAX_UPLOAD_SIZE):
        raise UploadRejectedError("File too large")

    form = await request.form()
    try:
        file = next((value for value in form.values() if isinstance(value, UploadFile)), None)
        if file is None:
            raise UploadRejectedError("No file provided")

        if not is_valid_media_type(file.content_type):
            raise UploadRejectedError("Invalid file format")

        filename = build_filename(file.filename)
        await run_in_threadpool(
            save_upload,
            file.file,
            filename,
            Path(settings.UPLOAD_DIR),
            max_size=settings.MAX_UPLOAD_SIZE,
            chunk_size=settings.UPLOAD_CHUNK_SIZE,
        )
    finally:
        await form.close()

    file_url = str(request.url_for("uploads", path=filename))
    return {"file_url": file_url}
