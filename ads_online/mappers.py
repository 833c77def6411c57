# ads_online/mappers.py
"""ORM entity -> API schema conversion"""
from ads_online.models.ad import Ad as AdEntity
from ads_online.models.comment import Comment as CommentEntity
from ads_online.models.user import User as UserEntity
from ads_online.schemas.ad import Ad, Ads, ExtendedAd
from ads_online.schemas.comment import Comment, Comments
from ads_online.schemas.user import UpdateUser, User

def to_ad(ad: AdEntity) -> Ad:
    return Ad(
        pk=ad.id,
        author=ad.author_id,
        image=ad.image,
        price=ad.price,
        title=ad.title
    )

def to_ads(ads: list[AdEntity]) -> Ads:
    return Ads(count=len(ads), results=[to_ad(ad) for ad in ads])

def to_extended_ad(ad: AdEntity) -> ExtendedAd:
    author = ad.author
    return ExtendedAd(
        pk=ad.id,
        author_first_name=author.first_name,
        author_last_name=author.last_name,
        description=ad.description,
        email=author.username,
        image=ad.image,
        phone=author.phone,
        price=ad.price,
        title=ad.title
    )

def to_comment(comment: CommentEntity) -> Comment:
    author = comment.author
    return Comment(
        pk=comment.id,
        author=author.id,
        author_image=author.image,
        author_first_name=author.first_name,
        created_at=comment.created_at,
        text=comment.text
    )

def to_comments(comments: list[CommentEntity]) -> Comments:
    return Comments(count=len(comments), results=[to_comment(c) for c in comments])

def to_user(user: UserEntity) -> User:
    return User(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone,
        role=user.role,
        image=user.image
    )

def to_update_user(user: UserEntity) -> UpdateUser:
    return UpdateUser(
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone
    )
