# ads_online/schemas/comment.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class CreateOrUpdateComment(BaseModel):
    """Comment create/update request"""
    text: str = Field(..., min_length=8, max_length=64)

class Comment(BaseModel):
    """Comment response"""
    pk: int
    author: int
    author_image: str | None = None
    author_first_name: str
    created_at: int  # epoch millis
    text: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Comments(BaseModel):
    """Comment list response"""
    count: int
    results: list[Comment]
