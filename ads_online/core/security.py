# ads_online/core/security.py
import bcrypt

from ads_online.config import settings

def hash_password(password: str) -> str:
    """bcrypt hash (algorithm, cost and salt live in the hash string)"""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False
