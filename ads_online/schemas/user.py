# ads_online/schemas/user.py
import re

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ads_online.models.user import Role

PHONE_PATTERN = r"^\+7\s?\(?\d{3}\)?\s?\d{3}-?\d{2}-?\d{2}$"

def normalize_phone(phone: str) -> str:
    """Canonical "+7 (ddd) ddd-dd-dd" form of an accepted phone"""
    digits = re.sub(r"\D", "", phone)[1:]
    return f"+7 ({digits[:3]}) {digits[3:6]}-{digits[6:8]}-{digits[8:]}"

class CamelModel(BaseModel):
    """Request/response model with camelCase JSON keys"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Register(CamelModel):
    """Registration request"""
    username: str = Field(..., min_length=4, max_length=32)
    password: str = Field(..., min_length=8, max_length=16)
    first_name: str = Field(..., min_length=2, max_length=16)
    last_name: str = Field(..., min_length=2, max_length=16)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    role: Role = Role.USER

    @field_validator("phone")
    def canonical_phone(cls, v):
        return normalize_phone(v)

class Login(CamelModel):
    """Login request"""
    username: str = Field(..., min_length=4, max_length=32)
    password: str = Field(..., min_length=8, max_length=16)

class NewPassword(CamelModel):
    """Password change request"""
    current_password: str = Field(..., min_length=8, max_length=16)
    new_password: str = Field(..., min_length=8, max_length=16)

class UpdateUser(CamelModel):
    """Profile update request and response"""
    first_name: str = Field(..., min_length=2, max_length=16)
    last_name: str = Field(..., min_length=2, max_length=16)
    phone: str = Field(..., pattern=PHONE_PATTERN)

    @field_validator("phone")
    def canonical_phone(cls, v):
        return normalize_phone(v)

class User(CamelModel):
    """User profile response"""
    id: int
    username: str
    first_name: str
    last_name: str
    phone: str
    role: Role
    image: str | None = None
