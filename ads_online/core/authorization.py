# ads_online/core/authorization.py
"""Ownership checks for ads and comments.

Both checks load the target first, so a missing resource always surfaces as
404 before ownership is considered. A comment addressed through an ad it
does not belong to is reported as missing as well, which keeps comment ids
from leaking across ads.
"""
from sqlalchemy.orm import Session

from ads_online import crud
from ads_online.core.exceptions import NotFoundException
from ads_online.core.logger import logger
from ads_online.models.user import User

def _is_owner_or_admin(principal: User, author_id: int) -> bool:
    return principal.id == author_id or principal.is_admin()

def can_modify_ad(db: Session, principal: User, ad_id: int) -> bool:
    """True if the principal wrote the ad or is an admin"""
    ad = crud.get_ad(db, ad_id)
    if ad is None:
        message = f"Ad with id={ad_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)

    return _is_owner_or_admin(principal, ad.author_id)

def can_modify_comment(db: Session, principal: User, ad_id: int, comment_id: int) -> bool:
    """True if the principal wrote the comment or is an admin"""
    comment = crud.get_comment(db, comment_id)
    if comment is None:
        message = f"Comment with id={comment_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)

    if comment.ad_id != ad_id:
        message = f"Comment id={comment_id} does not belong to ad id={ad_id}"
        logger.warning(message)
        raise NotFoundException(message)

    return _is_owner_or_admin(principal, comment.author_id)
