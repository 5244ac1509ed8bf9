"""
Validation and storage of uploaded media files.
"""
import os
import re
import uuid
from pathlib import Path
from typing import BinaryIO, Optional

from spacetime.exceptions import UploadRejectedError
from spacetime.spacetime_logger import logger

# Any image or video subtype, e.g. image/png, video/mp4, image/svg+xml
MIME_TYPE_PATTERN = re.compile(r"^(image|video)/[a-z0-9][a-z0-9.+-]*$", re.IGNORECASE)

# Extensions that can be served back without URL escaping
EXTENSION_PATTERN = re.compile(r"^\.[A-Za-z0-9]+$")

# Room for multipart boundaries and part headers around the file bytes
MULTIPART_OVERHEAD = 16 * 1024


def is_valid_media_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return MIME_TYPE_PATTERN.match(content_type) is not None


def exceeds_upload_limit(content_length: Optional[str], max_size: int) -> bool:
    """True when the declared request size cannot fit a file of ``max_size`` bytes"""
    try:
        declared = int(content_length)
    except (TypeError, ValueError):
        return False
    return declared > max_size + MULTIPART_OVERHEAD


def build_filename(original_filename: Optional[str]) -> str:
    """Random name keeping the uploaded file's extension, e.g. ``<uuid>.png``

    Extensions with anything but ASCII letters and digits are dropped.
    """
    extension = os.path.splitext(original_filename or "")[1]
    if not EXTENSION_PATTERN.match(extension):
        extension = ""
    return f"{uuid.uuid4()}{extension}"


def save_upload(
    source: BinaryIO,
    filename: str,
    upload_dir: Path,
    max_size: int,
    chunk_size: int = 64 * 1024,
) -> Path:
    """
    Copy ``source`` into ``upload_dir/filename`` chunk by chunk.

    Raises UploadRejectedError once more than ``max_size`` bytes were read.
    The destination is removed whenever the copy does not complete.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    destination = upload_dir / filename
    written = 0

    try:
        with open(destination, "wb") as buffer:
            while True:
                chunk = source.read(chunk_size)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_size:
                    raise UploadRejectedError("File too large")
                buffer.write(chunk)
    except BaseException:
        destination.unlink(missing_ok=True)
        raise

    logger.info(f"Stored upload {filename} ({written} bytes)")
    return destination
