"""FastAPI dependencies for request identity.

Authentication is optional: a Bearer JWT identifies the user recorded as
``created_by``; without one the configured anonymous id is used. A token that
is present but invalid or expired is rejected with a 401 and an RFC6750
``WWW-Authenticate`` header.
"""

import logging
import time
from typing import Any, Optional

import jwt
from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from application.settings import Settings, app_settings

log = logging.getLogger(__name__)

# Optional bearer token (won't raise error if missing)
security_optional = HTTPBearer(auto_error=False, scheme_name="bearer")


def get_settings() -> Settings:
    """Get application settings."""
    return app_settings


def decode_bearer_token(token: str, settings: Settings) -> dict[str, Any]:
    """Decode a JWT Bearer token into user claims.

    Args:
        token: The raw JWT
        settings: Application settings (secret, algorithm, verification flag)

    Returns:
        User dictionary with ``sub``, ``email``, ``name`` and ``roles``

    Raises:
        HTTPException: 401 if the token is expired or invalid
    """
    try:
        if settings.verify_jwt_signature:
            claims = jwt.decode(
                token,
                settings.jwt_secret_key,
                algorithms=[settings.jwt_algorithm],
                options={"verify_aud": False},
            )
        else:
            claims = jwt.decode(token, options={"verify_signature": False})
            exp = claims.get("exp")
            if isinstance(exp, int) and exp < int(time.time()):
                raise jwt.ExpiredSignatureError("Signature has expired")
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token expired. Re-authorize to obtain a new access token.",
            headers={"WWW-Authenticate": 'Bearer error="invalid_token", error_description="The access token expired"'},
        )
    except jwt.PyJWTError as e:
        log.debug(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token.",
            headers={"WWW-Authenticate": 'Bearer error="invalid_token", error_description="Malformed token"'},
        )

    subject = claims.get("sub") or claims.get("preferred_username")
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token has no subject claim.",
            headers={"WWW-Authenticate": 'Bearer error="invalid_token"'},
        )

    return {
        "sub": subject,
        "email": claims.get("email"),
        "name": claims.get("name") or claims.get("preferred_username"),
        "roles": claims.get("roles", []),
    }


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security_optional),
) -> dict[str, Any]:
    """Get the current user from an optional JWT Bearer token.

    Args:
        credentials: JWT Bearer token from Authorization header

    Returns:
        User information dictionary; anonymous when no token is sent
    """
    settings = get_settings()
    if credentials is None:
        return {"sub": settings.anonymous_user_id, "email": None, "name": None, "roles": []}
    return decode_bearer_token(credentials.credentials, settings)

