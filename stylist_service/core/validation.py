"""
Input Validation Module (v1.1.0)
Validates source photos (data URIs / files) before image editing.
"""
import io
import re
import base64
import binascii
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from PIL import Image

logger = logging.getLogger(__name__)

# Configuration
MAX_FILE_SIZE_MB = 15
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
MIN_PAYLOAD_LENGTH = 50  # shortest base64 payload treated as a real image
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/heic", "image/gif"}

MIME_TYPES_BY_EXTENSION = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}

DATA_URI_PATTERN = re.compile(r"^data:image/(\w+);base64,(.+)$", re.DOTALL)


class ValidationError(Exception):
    """Caller error: bad photo, bad style list, unknown scenario."""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class PhotoUnavailableError(Exception):
    """The source photo cannot be read at all; aborts a whole batch."""


@dataclass(frozen=True)
class PhotoPayload:
    mime_type: str
    data: str  # base64, without the data: prefix

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def parse_data_uri(photo: Optional[str]) -> Optional[PhotoPayload]:
    """
    Split `data:image/<subtype>;base64,<payload>` into mime type and payload.

    Returns:
        PhotoPayload or None if the string is not an image data URI
    """
    if not isinstance(photo, str):
        return None
    match = DATA_URI_PATTERN.match(photo.strip())
    if not match:
        return None
    return PhotoPayload(mime_type=f"image/{match.group(1).lower()}", data=match.group(2))


def validate_file_size(content: bytes) -> None:
    """
    Check if file size is within limits.

    Raises:
        ValidationError: If file exceeds MAX_FILE_SIZE_MB
    """
    size_mb = len(content) / (1024 * 1024)
    if len(content) > MAX_FILE_SIZE_BYTES:
        raise ValidationError(
            f"File too large: {size_mb:.1f}MB (max {MAX_FILE_SIZE_MB}MB)",
            status_code=413
        )
    logger.debug(f"File size OK: {size_mb:.2f}MB")


def validate_mime_type(mime_type: Optional[str]) -> None:
    """
    Check if MIME type is allowed.

    Raises:
        ValidationError: If MIME type is not in ALLOWED_MIME_TYPES
    """
    if mime_type is None:
        raise ValidationError("Missing image MIME type", status_code=415)

    mime = mime_type.split(";")[0].strip().lower()
    if mime not in ALLOWED_MIME_TYPES:
        raise ValidationError(
            f"Unsupported file type: {mime}. Allowed: {', '.join(sorted(ALLOWED_MIME_TYPES))}",
            status_code=415
        )


def decode_image(content: bytes) -> Image.Image:
    """
    Decode image bytes to PIL Image.

    Raises:
        ValidationError: If image cannot be decoded
    """
    try:
        image = Image.open(io.BytesIO(content))
        image.load()  # Force load to catch truncated images
        return image
    except Exception as e:
        raise ValidationError(f"Cannot decode image: {str(e)}", status_code=400)


def validate_photo_data_uri(photo: Optional[str]) -> PhotoPayload:
    """
    Full validation of a photo data URI: prefix, MIME, base64, size.

    Pixel decoding is left to the provider; only the envelope is checked here.

    Raises:
        ValidationError: On any malformed input
    """
    payload = parse_data_uri(photo)
    if payload is None:
        raise ValidationError("Photo must be a data:image/<type>;base64 URI")

    validate_mime_type(payload.mime_type)

    if len(payload.data) < MIN_PAYLOAD_LENGTH:
        raise ValidationError("Photo payload too short")

    try:
        content = base64.b64decode(payload.data, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Photo payload is not valid base64")

    validate_file_size(content)
    return payload


def load_photo_data_uri(image_path: str) -> str:
    """
    Read an image file into a data URI for the image-edit provider.

    Raises:
        PhotoUnavailableError: Missing, oversized or undecodable file
    """
    path = Path(image_path)

    if not path.exists():
        raise PhotoUnavailableError(f"Image not found: {image_path}")

    try:
        content = path.read_bytes()
        validate_file_size(content)
        image = decode_image(content)
    except (OSError, ValidationError) as e:
        raise PhotoUnavailableError(f"Cannot read photo {image_path}: {e}") from e

    mime_type = MIME_TYPES_BY_EXTENSION.get(path.suffix.lower())
    if mime_type is None:
        mime_type = Image.MIME.get(image.format or "", "image/jpeg")

    b64 = base64.b64encode(content).decode("utf-8")
    logger.debug(f"Loaded photo {path.name}: {image.size[0]}x{image.size[1]} {mime_type}")
    return f"data:{mime_type};base64,{b64}"
