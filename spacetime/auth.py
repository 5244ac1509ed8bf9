"""
JWT helpers and the bearer-token dependency guarding the memories routes.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from spacetime.config import settings
from spacetime.spacetime_logger import logger

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None, **claims: Any) -> str:
    """Create a signed JWT whose subject is the user id"""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = dict(claims)
    to_encode.update({
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify the token signature and expiry. Raises JWTError when invalid."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Resolve the caller's user id.

    With AUTH_ENABLED off every caller is the anonymous placeholder user.
    Otherwise a valid bearer token is required and its ``sub`` claim is used.
    """
    if not settings.AUTH_ENABLED:
        return settings.ANONYMOUS_USER_ID

    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise _unauthorized("Invalid authentication token")

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid authentication token")
    return str(user_id)
