# ads_online/services/auth_service.py
from sqlalchemy.orm import Session

from ads_online import crud
from ads_online.core.exceptions import BadRequestException
from ads_online.core.logger import logger
from ads_online.core.security import hash_password, verify_password
from ads_online.models.user import User
from ads_online.schemas.user import Register

def register(db: Session, data: Register) -> User:
    """Create a user account"""
    if crud.get_user_by_username(db, data.username):
        logger.warning(f"Registration rejected, username {data.username} is taken")
        raise BadRequestException("User with this username already exists")

    if crud.get_user_by_phone(db, data.phone):
        logger.warning(f"Registration rejected, phone {data.phone} is taken")
        raise BadRequestException("User with this phone already exists")

    user = User(
        username=data.username,
        password=hash_password(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        role=data.role
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user={user.username} role={user.role.value}")
    return user

def authenticate(db: Session, username: str, password: str) -> User | None:
    """User for valid credentials, else None"""
    user = crud.get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password):
        return None
    return user

def login(db: Session, username: str, password: str) -> bool:
    return authenticate(db, username, password) is not None
