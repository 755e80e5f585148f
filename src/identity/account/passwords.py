"""Password hashing for accounts."""

from passlib.context import CryptContext

MIN_PASSWORD_LENGTH = 6

pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], default="pbkdf2_sha256", deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    return pwd_ctx.verify(password, password_hash)
