# ads_online/models/image.py
from sqlalchemy import Column, Integer, LargeBinary
from ads_online.database import Base

class Image(Base):
    """Stored image bytes"""
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, index=True)
    data = Column(LargeBinary, nullable=False)

    def __repr__(self):
        return f"<Image {self.id} ({len(self.data or b'')} bytes)>"
