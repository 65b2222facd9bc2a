"""
Bearer token validation shared by every protected route.

Tokens are HS256 JWTs signed with ``SECRET_KEY``. A request without a bearer
token, or with a token that fails verification, is rejected with 401 before
the route handler runs.
"""

import logging
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.errors import UnauthorizedException
from core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def validate_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Validate the bearer token from the Authorization header.

    Returns:
        The decoded token claims.

    Raises:
        UnauthorizedException: if the header is missing, the scheme is not
            Bearer, or the token is invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Acceso denegado, token no proporcionado")

    try:
        claims = jwt.decode(
            credentials.credentials,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedException("Token expirado") from None
    except jwt.InvalidTokenError as exc:
        logger.debug(f"Token rejected: {exc!s}")
        raise UnauthorizedException("Token no válido") from None

    return claims
