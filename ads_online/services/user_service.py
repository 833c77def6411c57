# ads_online/services/user_service.py
from sqlalchemy.orm import Session

from ads_online import crud, mappers
from ads_online.core.exceptions import BadRequestException, ForbiddenException
from ads_online.core.logger import logger
from ads_online.core.security import hash_password, verify_password
from ads_online.models.user import User as UserEntity
from ads_online.schemas.user import UpdateUser, User
from ads_online.services import image_service

def set_password(db: Session, principal: UserEntity, current_password: str, new_password: str) -> None:
    """Change password after checking the current one"""
    if not verify_password(current_password, principal.password):
        logger.warning(f"Wrong current password for user={principal.username}")
        raise ForbiddenException("Wrong password")

    principal.password = hash_password(new_password)
    db.commit()

def get_profile(principal: UserEntity) -> User:
    return mappers.to_user(principal)

def update_profile(db: Session, principal: UserEntity, patch: UpdateUser) -> UpdateUser:
    """Overwrite first/last name and phone"""
    owner = crud.get_user_by_phone(db, patch.phone)
    if owner is not None and owner.id != principal.id:
        raise BadRequestException("Phone number is already in use")

    principal.first_name = patch.first_name
    principal.last_name = patch.last_name
    principal.phone = patch.phone
    db.commit()
    db.refresh(principal)

    return mappers.to_update_user(principal)

def update_avatar(db: Session, principal: UserEntity, image_data: bytes | None) -> str:
    """Set the avatar; an existing avatar image is overwritten in place"""
    if principal.image is None:
        image = image_service.upload_image(db, image_data)
    else:
        image_id = image_service.parse_image_reference(principal.image)
        image = image_service.update_image(db, image_id, image_data)

    principal.image = image_service.image_reference(image)
    db.commit()

    logger.info(f"Avatar of user={principal.username} is now {principal.image}")
    return principal.image
