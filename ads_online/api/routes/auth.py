# ads_online/api/routes/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ads_online.core.exceptions import UnauthorizedException
from ads_online.core.logger import logger
from ads_online.database import get_db
from ads_online.schemas.user import Login, Register
from ads_online.services import auth_service

router = APIRouter(tags=["Auth"])

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: Register, db: Session = Depends(get_db)):
    """Sign up"""
    auth_service.register(db, data)
    return Response(status_code=status.HTTP_201_CREATED)

@router.post("/login")
def login(data: Login, db: Session = Depends(get_db)):
    """Check credentials"""
    if not auth_service.login(db, data.username, data.password):
        logger.warning(f"Failed login for user={data.username}")
        raise UnauthorizedException()
    return Response(status_code=status.HTTP_200_OK)
