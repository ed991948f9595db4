"""Image upload endpoint (admin only): store an image and return its public URL."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from portfolio.api.auth import require_admin
from portfolio.core import errors
from portfolio.core.config import get_settings
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.upload import UploadResponse
from portfolio.services.uploads import save_image, validate_image

router = APIRouter()


@router.post("", response_model=UploadResponse)
async def upload_image(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    image: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """
    Accept a multipart form with an `image` field (jpeg, jpg, png, gif or webp, at most 5 MB).

    Returns `{"imageUrl": "/uploads/<name>"}`; the file is served from that path.
    """
    if image is None or not image.filename:
        raise errors.ValidationError("No file uploaded")
    validate_image(image.filename, image.content_type)
    settings = get_settings()
    # Read one byte past the limit so oversize files are detected without reading them whole.
    content = await image.read(settings.MAX_UPLOAD_BYTES + 1)
    # Disk writes run in the threadpool so large files do not block the event loop.
    image_url = await run_in_threadpool(
        save_image,
        settings.UPLOAD_DIR,
        image.filename,
        image.content_type,
        content,
        settings.MAX_UPLOAD_BYTES,
    )
    return UploadResponse(image_url=image_url)
