# ads_online/services/comment_service.py
import time

from sqlalchemy.orm import Session

from ads_online import crud, mappers
from ads_online.core.exceptions import NotFoundException
from ads_online.core.logger import logger
from ads_online.models.comment import Comment as CommentEntity
from ads_online.models.user import User
from ads_online.schemas.comment import Comment, Comments, CreateOrUpdateComment

def _now_millis() -> int:
    return int(time.time() * 1000)

def _get_comment_of_ad(db: Session, ad_id: int, comment_id: int) -> CommentEntity:
    comment = crud.get_comment(db, comment_id)
    if comment is None:
        message = f"Comment with id={comment_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)

    if comment.ad_id != ad_id:
        message = f"Comment id={comment_id} does not belong to ad id={ad_id}"
        logger.warning(message)
        raise NotFoundException(message)

    return comment

def list_for_ad(db: Session, ad_id: int) -> Comments:
    """All comments of an ad"""
    if not crud.ad_exists(db, ad_id):
        message = f"Ad with id={ad_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)

    return mappers.to_comments(crud.list_comments_by_ad(db, ad_id))

def create(db: Session, author: User, ad_id: int, properties: CreateOrUpdateComment) -> Comment:
    """Add a comment to an existing ad"""
    ad = crud.get_ad(db, ad_id)
    if ad is None:
        message = f"Ad with id={ad_id} was not found"
        logger.warning(message)
        raise NotFoundException(message)

    comment = CommentEntity(
        ad_id=ad.id,
        author_id=author.id,
        text=properties.text,
        created_at=_now_millis()
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)

    logger.info(f"Created comment id={comment.id} on ad id={ad_id} by user={author.username}")
    return mappers.to_comment(comment)

def update(db: Session, ad_id: int, comment_id: int, properties: CreateOrUpdateComment) -> Comment:
    """Replace comment text"""
    comment = _get_comment_of_ad(db, ad_id, comment_id)

    comment.text = properties.text
    db.commit()
    db.refresh(comment)

    return mappers.to_comment(comment)

def delete(db: Session, ad_id: int, comment_id: int) -> None:
    comment = _get_comment_of_ad(db, ad_id, comment_id)

    db.delete(comment)
    db.commit()

    logger.info(f"Deleted comment id={comment_id} of ad id={ad_id}")
