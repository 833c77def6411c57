# ads_online/api/routes/users.py
from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.orm import Session

from ads_online.api.deps import get_current_user, read_upload
from ads_online.database import get_db
from ads_online.models.user import User
from ads_online.schemas.user import NewPassword, UpdateUser, User as UserSchema
from ads_online.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])

@router.patch("/set_password")
def set_password(
    data: NewPassword,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change password"""
    user_service.set_password(db, current_user, data.current_password, data.new_password)
    return Response(status_code=status.HTTP_200_OK)

@router.get("/me", response_model=UserSchema)
def get_me(current_user: User = Depends(get_current_user)):
    """Current user profile"""
    return user_service.get_profile(current_user)

@router.patch("/me", response_model=UpdateUser)
def update_me(
    data: UpdateUser,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update name and phone"""
    return user_service.update_profile(db, current_user, data)

@router.patch("/me/image")
async def update_my_image(
    image: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Set avatar"""
    image_data = await read_upload(image)
    user_service.update_avatar(db, current_user, image_data)
    return Response(status_code=status.HTTP_200_OK)
