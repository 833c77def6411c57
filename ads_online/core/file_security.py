# ads_online/core/file_security.py
import io

from PIL import Image, UnidentifiedImageError

from ads_online.config import settings
from ads_online.core.exceptions import ImageUploadException

DEFAULT_MEDIA_TYPE = "application/octet-stream"
ALLOWED_FORMATS = {"JPEG", "PNG", "WEBP", "GIF", "BMP"}

def detect_format(data: bytes) -> str | None:
    """Image format from the magic bytes (None if unrecognised)"""
    if not data:
        return None
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        return None

def detect_media_type(data: bytes) -> str:
    """MIME type for serving stored bytes"""
    image_format = detect_format(data)
    if image_format is None:
        return DEFAULT_MEDIA_TYPE
    return Image.MIME.get(image_format, DEFAULT_MEDIA_TYPE)

def validate_image_size(data: bytes | None) -> None:
    if not data:
        raise ImageUploadException("No image provided or empty image data")

    if len(data) > settings.image_max_size:
        raise ImageUploadException(
            f"Image size exceeds the allowed limit: {settings.image_max_size} bytes"
        )

def validate_image_format(data: bytes) -> None:
    image_format = detect_format(data)
    if image_format not in ALLOWED_FORMATS:
        raise ImageUploadException(
            f"Unsupported image type. Allowed: {', '.join(sorted(ALLOWED_FORMATS))}"
        )

def validate_image(data: bytes | None) -> None:
    """Full image check"""
    validate_image_size(data)
    validate_image_format(data)
