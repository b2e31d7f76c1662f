"""
Coach credential hashing.

Credentials are stored as a single unsalted SHA-256 hex digest per username.
"""
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["hex_sha256"])


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)
