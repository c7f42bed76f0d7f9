"""
Authentication Service
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import jwt, JWTError
from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ..config import settings

logger = logging.getLogger(__name__)

# Security
security = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token whose subject is the user identity"""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.jwt_expiration_days))
    to_encode = {
        "sub": user_id,
        "exp": expire
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_identity(token: str) -> Optional[str]:
    """Return the identity carried by a token, or None if it is not valid"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None

    user_id = payload.get("sub")
    return str(user_id) if user_id else None


async def require_auth(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> str:
    """Require authenticated identity"""
    if not credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = decode_identity(credentials.credentials)
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")

    return user_id
