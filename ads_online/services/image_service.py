# ads_online/services/image_service.py
import re

from sqlalchemy.orm import Session

from ads_online import crud
from ads_online.core.exceptions import ImageDeletionException, NotFoundException
from ads_online.core.file_security import validate_image
from ads_online.core.logger import logger
from ads_online.models.image import Image

IMAGE_URL_PREFIX = "/images/"
IMAGE_REFERENCE_PATTERN = re.compile(r"^/images/(\d+)$")

# Functions here only add/flush; the calling service owns the commit.

def image_reference(image: Image) -> str:
    """Reference string stored on ads and users"""
    return f"{IMAGE_URL_PREFIX}{image.id}"

def parse_image_reference(reference: str | None) -> int:
    """Image id from "/images/{id}" """
    match = IMAGE_REFERENCE_PATTERN.match(reference or "")
    if match is None:
        message = f"Failed to parse image ID from reference {reference!r}"
        logger.error(message)
        raise ImageDeletionException(message)
    return int(match.group(1))

def get_image(db: Session, image_id: int) -> Image:
    image = crud.get_image(db, image_id)
    if image is None:
        message = f"Image with id={image_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)
    return image

def upload_image(db: Session, data: bytes) -> Image:
    """Validate and store new image bytes; id is assigned on flush"""
    validate_image(data)

    image = Image(data=data)
    db.add(image)
    db.flush()

    logger.info(f"Stored image id={image.id} ({len(data)} bytes)")
    return image

def update_image(db: Session, image_id: int, data: bytes) -> Image:
    """Overwrite image bytes in place (same id)"""
    image = get_image(db, image_id)
    validate_image(data)

    if image.data == data:
        logger.info(f"Image id={image_id} is unchanged, skipping save")
        return image

    image.data = data
    db.flush()
    return image

def delete_image(db: Session, image_id: int) -> None:
    image = get_image(db, image_id)
    db.delete(image)
    db.flush()
    logger.info(f"Deleted image id={image_id}")
