# ads_online/api/routes/images.py
from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from ads_online.core.file_security import detect_media_type
from ads_online.database import get_db
from ads_online.services import image_service

router = APIRouter(prefix="/images", tags=["Images"])

@router.get("/{image_id}", response_class=Response)
def get_image(
    image_id: int = Path(..., gt=0),
    db: Session = Depends(get_db)
):
    """Raw image bytes (no auth); content type is sniffed from the bytes"""
    image = image_service.get_image(db, image_id)
    return Response(content=image.data, media_type=detect_media_type(image.data))
