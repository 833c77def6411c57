# ads_online/crud.py
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ads_online.models.ad import Ad
from ads_online.models.comment import Comment
from ads_online.models.image import Image
from ads_online.models.user import User

# ----- users -----

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()

def get_user_by_phone(db: Session, phone: str) -> Optional[User]:
    return db.query(User).filter(User.phone == phone).first()

# ----- ads -----

def get_ad(db: Session, ad_id: int) -> Optional[Ad]:
    return db.query(Ad).filter(Ad.id == ad_id).first()

def ad_exists(db: Session, ad_id: int) -> bool:
    return db.query(Ad.id).filter(Ad.id == ad_id).first() is not None

def list_ads(db: Session) -> list[Ad]:
    return db.query(Ad).order_by(Ad.id).all()

def list_ads_by_author(db: Session, author_id: int) -> list[Ad]:
    return db.query(Ad)\
        .filter(Ad.author_id == author_id)\
        .order_by(Ad.id)\
        .all()

# ----- comments -----

def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    return db.query(Comment).filter(Comment.id == comment_id).first()

def list_comments_by_ad(db: Session, ad_id: int) -> list[Comment]:
    """Comments of an ad with their authors loaded in the same query"""
    return db.query(Comment)\
        .options(joinedload(Comment.author))\
        .filter(Comment.ad_id == ad_id)\
        .order_by(Comment.created_at, Comment.id)\
        .all()

# ----- images -----

def get_image(db: Session, image_id: int) -> Optional[Image]:
    return db.query(Image).filter(Image.id == image_id).first()
