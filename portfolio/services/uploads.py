"""Image upload validation and storage on local disk."""

import logging
import secrets
import time
from pathlib import Path

from portfolio.core import errors

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpeg", ".jpg", ".png", ".gif", ".webp"})
ALLOWED_IMAGE_MIME_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
)
UPLOAD_URL_PREFIX = "/uploads"


def validate_image(filename: str, content_type: str | None) -> str:
    """Return the lower-cased extension; both MIME type and extension must be an allowed image type."""
    ext = Path(filename or "").suffix.lower()
    mime = (content_type or "").split(";")[0].strip().lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS or mime not in ALLOWED_IMAGE_MIME_TYPES:
        raise errors.ValidationError("Only image files are allowed!")
    return ext


def build_filename(ext: str, field_name: str = "image") -> str:
    """Unique name: <field>-<epoch ms>-<random><ext>."""
    millis = int(time.time() * 1000)
    return f"{field_name}-{millis}-{secrets.randbelow(10**9)}{ext}"


def save_image(
    upload_dir: str | Path,
    filename: str,
    content_type: str | None,
    content: bytes,
    max_bytes: int,
) -> str:
    """Validate and write the image; return its public URL under /uploads."""
    ext = validate_image(filename, content_type)
    if not content:
        raise errors.ValidationError("No file uploaded")
    if len(content) > max_bytes:
        raise errors.ValidationError(
            f"File size must not exceed {max_bytes // (1024 * 1024)} MB."
        )
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stored_name = build_filename(ext)
    try:
        (directory / stored_name).write_bytes(content)
    except OSError as e:
        logger.exception("Failed to write upload to %s", directory)
        raise errors.InternalError("Failed to upload file") from e
    logger.info("Image uploaded", extra={"stored_name": stored_name, "size_bytes": len(content)})
    return f"{UPLOAD_URL_PREFIX}/{stored_name}"
