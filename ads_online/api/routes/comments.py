# ads_online/api/routes/comments.py
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from ads_online.api.deps import get_current_user
from ads_online.core import authorization
from ads_online.core.exceptions import ForbiddenException
from ads_online.database import get_db
from ads_online.models.user import User
from ads_online.schemas.comment import Comment, Comments, CreateOrUpdateComment
from ads_online.services import comment_service

router = APIRouter(prefix="/ads", tags=["Comments"])

def check_comment_permission(db: Session, current_user: User, ad_id: int, comment_id: int) -> None:
    # 404 if missing or under another ad, 403 if not the author/admin
    if not authorization.can_modify_comment(db, current_user, ad_id, comment_id):
        raise ForbiddenException(
            f"User {current_user.username} may not modify comment id={comment_id}"
        )

@router.get("/{ad_id}/comments", response_model=Comments)
def get_comments(
    ad_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Comments of an ad"""
    return comment_service.list_for_ad(db, ad_id)

@router.post("/{ad_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
def add_comment(
    properties: CreateOrUpdateComment,
    response: Response,
    ad_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Comment on an ad"""
    created = comment_service.create(db, current_user, ad_id, properties)
    response.headers["Location"] = f"{router.prefix}/{ad_id}/comments/{created.pk}"
    return created

@router.patch("/{ad_id}/comments/{comment_id}", response_model=Comment)
def update_comment(
    properties: CreateOrUpdateComment,
    ad_id: int = Path(..., gt=0),
    comment_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit comment text (author or admin)"""
    check_comment_permission(db, current_user, ad_id, comment_id)
    return comment_service.update(db, ad_id, comment_id, properties)

@router.delete("/{ad_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    ad_id: int = Path(..., gt=0),
    comment_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a comment (author or admin)"""
    check_comment_permission(db, current_user, ad_id, comment_id)
    comment_service.delete(db, ad_id, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
