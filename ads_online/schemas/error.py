# ads_online/schemas/error.py
from pydantic import BaseModel

class ErrorResponse(BaseModel):
    """Uniform error body"""
    status: int
    message: str
