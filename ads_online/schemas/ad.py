# ads_online/schemas/ad.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class CreateOrUpdateAd(BaseModel):
    """Ad create/update request"""
    title: str = Field(..., min_length=4, max_length=32)
    price: int = Field(..., ge=0, le=10_000_000)
    description: str = Field(..., min_length=8, max_length=64)

class Ad(BaseModel):
    """Ad response"""
    pk: int
    author: int  # author user id
    image: str
    price: int
    title: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Ads(BaseModel):
    """Ad list response"""
    count: int
    results: list[Ad]

class ExtendedAd(BaseModel):
    """Ad response with the author's contacts"""
    pk: int
    author_first_name: str
    author_last_name: str
    description: str
    email: str  # author username
    image: str
    phone: str
    price: int
    title: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
