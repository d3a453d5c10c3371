"""
JWT Service Implementation
Bearer tokens carry the caller uid in ``sub`` and the marketplace role in ``role``
"""
from datetime import timedelta
from typing import Optional

from jose import jwt, JWTError
from loguru import logger

from core.config import settings
from core.exceptions import AuthenticationException
from domain.enums import UserRole
from domain.timeutils import utcnow
from application.services.auth.interfaces import IJwtService, Identity


class JwtService(IJwtService):
    """JWT service using the configured symmetric algorithm"""

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM

        if settings.ENVIRONMENT == "production" and self.secret_key == "your-secret-key-change-in-production":
            logger.warning("Using the default JWT secret in production. Set JWT_SECRET_KEY!")

    def create_access_token(self, user_id: str, role: UserRole) -> str:
        """Create access token"""
        now = utcnow()
        payload = {
            "sub": str(user_id),
            "role": UserRole(role).value,
            "exp": now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
            "iat": now,
            "type": "access",
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Identity:
        """Verify and decode token"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise AuthenticationException("Invalid or expired token")

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationException("Token has no subject")

        try:
            role = UserRole(payload.get("role"))
        except ValueError:
            logger.warning(f"JWT for {subject} carries unknown role {payload.get('role')!r}")
            raise AuthenticationException("Token has no valid role")

        return Identity(user_id=subject, role=role)
