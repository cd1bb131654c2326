
import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from jose import jwt
from dms.config import settings


class PasswordHasher:
    """One-way password hashing backed by a passlib CryptContext."""

    def __init__(self, schemes: list[str] | None = None):
        self._ctx = CryptContext(schemes=schemes or settings.password_schemes, deprecated="auto")

    def hash(self, password: str) -> str:
        return self._ctx.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return self._ctx.verify(password, hashed)


class TokenSigner:
    """Signs and verifies JWT claims. Raises jose.JWTError on bad tokens."""

    def __init__(self, secret_key: str | None = None, algorithm: str | None = None):
        self.secret_key = secret_key or settings.secret_key
        self.algorithm = algorithm or settings.jwt_algorithm

    def sign(self, claims: dict, expires_minutes: int | None = None) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or settings.access_token_expire_minutes)
        to_encode = {**claims, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])


pwd_hasher = PasswordHasher()

def hash_password(password: str) -> str:
    return pwd_hasher.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_hasher.verify(password, hashed)

def new_reset_token() -> tuple[str, str]:
    """Returns (token, digest). Only the digest is persisted."""
    token = secrets.token_urlsafe(32)
    return token, digest_token(token)

def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
