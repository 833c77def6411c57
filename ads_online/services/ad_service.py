# ads_online/services/ad_service.py
from sqlalchemy.orm import Session

from ads_online import crud, mappers
from ads_online.core.exceptions import ImageUploadException, NotFoundException
from ads_online.core.logger import logger
from ads_online.models.ad import Ad as AdEntity
from ads_online.models.user import User
from ads_online.schemas.ad import Ad, Ads, CreateOrUpdateAd, ExtendedAd
from ads_online.services import image_service

def _get_ad_or_404(db: Session, ad_id: int) -> AdEntity:
    ad = crud.get_ad(db, ad_id)
    if ad is None:
        message = f"Ad with id={ad_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)
    return ad

def list_all(db: Session) -> Ads:
    """All ads"""
    return mappers.to_ads(crud.list_ads(db))

def list_for_user(db: Session, principal: User) -> Ads:
    """Ads written by the principal (possibly none)"""
    return mappers.to_ads(crud.list_ads_by_author(db, principal.id))

def create(db: Session, principal: User, properties: CreateOrUpdateAd, image_data: bytes | None) -> Ad:
    """Create an ad together with its image"""
    if not image_data:
        message = f"No image provided for ad titled {properties.title!r}"
        logger.warning(message)
        raise ImageUploadException(message)

    image = image_service.upload_image(db, image_data)

    ad = AdEntity(
        author_id=principal.id,
        title=properties.title,
        price=properties.price,
        description=properties.description,
        image=image_service.image_reference(image)
    )
    db.add(ad)
    # image row and ad row go in one transaction
    db.commit()
    db.refresh(ad)

    logger.info(f"Created ad id={ad.id} by user={principal.username}")
    return mappers.to_ad(ad)

def get(db: Session, ad_id: int) -> ExtendedAd:
    """Ad with the author's contact fields"""
    return mappers.to_extended_ad(_get_ad_or_404(db, ad_id))

def update(db: Session, ad_id: int, properties: CreateOrUpdateAd) -> Ad:
    """Overwrite title, price and description (image untouched)"""
    ad = _get_ad_or_404(db, ad_id)

    ad.title = properties.title
    ad.price = properties.price
    ad.description = properties.description
    db.commit()
    db.refresh(ad)

    return mappers.to_ad(ad)

def delete(db: Session, ad_id: int) -> None:
    """Delete an ad, its image and (by cascade) its comments"""
    ad = _get_ad_or_404(db, ad_id)

    image_id = image_service.parse_image_reference(ad.image)
    image_service.delete_image(db, image_id)
    db.delete(ad)
    db.commit()

    logger.info(f"Deleted ad id={ad_id}")

def update_image(db: Session, ad_id: int, image_data: bytes | None) -> str:
    """Replace the ad image; the old image row is removed"""
    ad = _get_ad_or_404(db, ad_id)

    new_image = image_service.upload_image(db, image_data)
    old_image_id = image_service.parse_image_reference(ad.image)
    image_service.delete_image(db, old_image_id)

    ad.image = image_service.image_reference(new_image)
    db.commit()

    return ad.image
