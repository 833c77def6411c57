# ads_online/models/user.py
from sqlalchemy import Column, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ads_online.database import Base
import enum

class Role(str, enum.Enum):
    """User role"""
    USER = "USER"
    ADMIN = "ADMIN"

class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(32), unique=True, index=True, nullable=False)  # email-like login
    password = Column(String, nullable=False)  # bcrypt hash

    # Profile
    first_name = Column(String(16), nullable=False)
    last_name = Column(String(16), nullable=False)
    phone = Column(String, unique=True, nullable=False)
    role = Column(SQLEnum(Role), nullable=False, default=Role.USER)

    # Avatar reference, "/images/{id}"
    image = Column(String, nullable=True)

    # Relations
    ads = relationship("Ad", back_populates="author")
    comments = relationship("Comment", back_populates="author")

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self):
        return f"<User {self.username}>"
