# /app/core/security.py

"""
Password hashing (bcrypt) and bearer-token issuance/verification (PyJWT).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from app.core import config
from app.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def warn_if_default_secret() -> bool:
    """Logs a warning when tokens are being signed with the built-in development secret."""
    if config.JWT_SECRET == config.DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is not set; tokens are signed with the insecure development default.")
        return True
    return False


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=config.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # A malformed stored hash never matches.
        return False


def create_access_token(subject: str, email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issues a signed token carrying the student's identity. Tokens are valid
    for ACCESS_TOKEN_EXPIRE_DAYS unless an explicit delta is given.
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS))
    payload = {"sub": str(subject), "exp": expire}
    if email:
        payload["email"] = email
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """Returns the student id carried by a valid token."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token")
    return subject
