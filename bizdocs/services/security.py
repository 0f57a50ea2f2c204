"""Password hashing and JWT encoding."""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from bizdocs.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def new_token_id() -> str:
    """Random identifier embedded in a token as its ``jti`` claim."""
    return secrets.token_urlsafe(32)


def token_digest(token_id: str) -> str:
    """Digest stored in place of the token identifier."""
    return hashlib.sha256(token_id.encode("utf-8")).hexdigest()


def token_expiry() -> datetime:
    return datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)


def create_access_token(user_id: int, token_id: str, expire: datetime) -> str:
    """Create a JWT access token."""
    to_encode = {
        "sub": str(user_id),
        "jti": token_id,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None
