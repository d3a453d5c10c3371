"""
Authentication Service Interfaces
Abstract base classes for token handling
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from domain.enums import UserRole


@dataclass(frozen=True)
class Identity:
    """Authenticated caller: identity provider uid plus marketplace role"""

    user_id: str
    role: UserRole

    def is_labor(self) -> bool:
        return self.role == UserRole.LABOR

    def is_supervisor(self) -> bool:
        return self.role == UserRole.SUPERVISOR


class IJwtService(ABC):
    """JWT token service interface"""

    @abstractmethod
    def create_access_token(self, user_id: str, role: UserRole) -> str:
        """Create access token"""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> Identity:
        """
        Verify and decode token

        Raises:
            AuthenticationException: token invalid, expired or missing claims
        """
        pass
