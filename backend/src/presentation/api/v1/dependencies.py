"""
FastAPI Dependencies
Current identity and role gates
"""
from typing import Optional

from fastapi import Depends, HTTPException, status, Header
from loguru import logger

from application.services.auth.interfaces import IJwtService, Identity
from core.exceptions import AuthenticationException
from .container import get_jwt_service


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    jwt_service: IJwtService = Depends(get_jwt_service)
) -> Identity:
    """
    Get the authenticated caller from the bearer token

    Usage:
        @router.get("/protected")
        async def protected_route(identity: Identity = Depends(get_current_identity)):
            ...
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(parts[1])
    except AuthenticationException:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_labor(
    identity: Identity = Depends(get_current_identity)
) -> Identity:
    """Only workers may call this route"""
    if not identity.is_labor():
        logger.warning(f"{identity.role.value} {identity.user_id} called a labor-only route")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This action is only available to workers"
        )
    return identity


async def require_supervisor(
    identity: Identity = Depends(get_current_identity)
) -> Identity:
    """Only supervisors may call this route"""
    if not identity.is_supervisor():
        logger.warning(f"{identity.role.value} {identity.user_id} called a supervisor-only route")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This action is only available to supervisors"
        )
    return identity
