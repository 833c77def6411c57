# ads_online/models/comment.py
from sqlalchemy import Column, Integer, BigInteger, String, ForeignKey
from sqlalchemy.orm import relationship
from ads_online.database import Base

class Comment(Base):
    """Comment model"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    ad_id = Column(Integer, ForeignKey("ads.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    text = Column(String(64), nullable=False)
    created_at = Column(BigInteger, nullable=False)  # epoch millis

    # Relations
    ad = relationship("Ad", back_populates="comments")
    author = relationship("User", back_populates="comments")

    def __repr__(self):
        return f"<Comment {self.id} on Ad {self.ad_id}>"
