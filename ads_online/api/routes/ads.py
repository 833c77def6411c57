# ads_online/api/routes/ads.py
from fastapi import APIRouter, Depends, File, Form, Path, Response, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ads_online.api.deps import get_current_user, read_upload
from ads_online.core import authorization
from ads_online.core.exceptions import ForbiddenException
from ads_online.database import get_db
from ads_online.models.user import User
from ads_online.schemas.ad import Ad, Ads, CreateOrUpdateAd, ExtendedAd
from ads_online.services import ad_service

router = APIRouter(prefix="/ads", tags=["Ads"])

def parse_properties(properties: str) -> CreateOrUpdateAd:
    """The "properties" multipart part carries the ad as JSON"""
    try:
        return CreateOrUpdateAd.model_validate_json(properties)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

def check_ad_permission(db: Session, current_user: User, ad_id: int) -> None:
    # 404 if missing, 403 if not the author/admin
    if not authorization.can_modify_ad(db, current_user, ad_id):
        raise ForbiddenException(f"User {current_user.username} may not modify ad id={ad_id}")

@router.get("", response_model=Ads)
def get_all_ads(db: Session = Depends(get_db)):
    """All ads (no auth)"""
    return ad_service.list_all(db)

@router.post("", response_model=Ad, status_code=status.HTTP_201_CREATED)
async def add_ad(
    response: Response,
    properties: str = Form(...),
    image: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create an ad with its image"""
    ad_properties = parse_properties(properties)
    image_data = await read_upload(image)

    created = ad_service.create(db, current_user, ad_properties, image_data)

    response.headers["Location"] = f"{router.prefix}/{created.pk}"
    return created

@router.get("/me", response_model=Ads)
def get_my_ads(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Ads of the current user"""
    return ad_service.list_for_user(db, current_user)

@router.get("/{ad_id}", response_model=ExtendedAd)
def get_ad(
    ad_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Ad details"""
    return ad_service.get(db, ad_id)

@router.patch("/{ad_id}", response_model=Ad)
def update_ad(
    properties: CreateOrUpdateAd,
    ad_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update ad text fields (author or admin)"""
    check_ad_permission(db, current_user, ad_id)
    return ad_service.update(db, ad_id, properties)

@router.delete("/{ad_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ad(
    ad_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an ad (author or admin)"""
    check_ad_permission(db, current_user, ad_id)
    ad_service.delete(db, ad_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.patch("/{ad_id}/image", response_class=PlainTextResponse)
async def update_ad_image(
    ad_id: int = Path(..., gt=0),
    image: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace the ad image, returns the new image reference"""
    check_ad_permission(db, current_user, ad_id)
    image_data = await read_upload(image)
    return PlainTextResponse(ad_service.update_image(db, ad_id, image_data))
