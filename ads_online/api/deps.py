# ads_online/api/deps.py
from fastapi import Depends, UploadFile
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from ads_online.core.exceptions import UnauthorizedException
from ads_online.database import get_db
from ads_online.models.user import User
from ads_online.services import auth_service

# HTTP Basic scheme; missing credentials are handled below
security = HTTPBasic(auto_error=False)

def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Authenticated principal from HTTP Basic credentials"""
    if credentials is None:
        raise UnauthorizedException()

    user = auth_service.authenticate(db, credentials.username, credentials.password)
    if user is None:
        raise UnauthorizedException()

    return user

async def read_upload(file: UploadFile) -> bytes:
    """Whole multipart file as bytes"""
    try:
        return await file.read()
    finally:
        await file.close()
