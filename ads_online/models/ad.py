# ads_online/models/ad.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ads_online.database import Base

class Ad(Base):
    """Ad model"""
    __tablename__ = "ads"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(32), nullable=False)
    price = Column(Integer, nullable=False)
    description = Column(String(64), nullable=False)

    # Image reference, "/images/{id}" (no foreign key)
    image = Column(String, nullable=False)

    # Relations
    author = relationship("User", back_populates="ads")
    comments = relationship("Comment", back_populates="ad", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Ad {self.id} {self.title}>"
