"""
Identity collaborator.

Validates bearer credentials issued elsewhere and maps them to an owner id.
Token issuance is not handled here.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from jose import jwt, JWTError, ExpiredSignatureError

from task_tracker.config import AUTH_SECRET, AUTH_ALGORITHM

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    """Capability consumed by the access guard."""

    @abstractmethod
    def validate(self, token: str) -> Optional[str]:
        """
        Resolve a credential to an owner identity.

        Args:
            token: Raw bearer token

        Returns:
            The owner id, or None when the token is not acceptable
        """


class JWTIdentityProvider(IdentityProvider):
    """Validates HS256 (or configured algorithm) JWTs carrying the owner id in `sub`."""

    def __init__(self, secret: Optional[str], algorithms: Optional[List[str]] = None):
        self.secret = secret
        self.algorithms = algorithms or [AUTH_ALGORITHM]
        if not self.secret:
            logger.warning("AUTH_SECRET is not configured; every token will be rejected")

    def validate(self, token: str) -> Optional[str]:
        if not self.secret or not token:
            return None

        try:
            payload = jwt.decode(token, self.secret, algorithms=self.algorithms)
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except JWTError as e:
            logger.info(f"Rejected invalid token: {str(e)}")
            return None

        subject = payload.get("sub")
        if not subject or not isinstance(subject, str):
            logger.info("Rejected token without a subject claim")
            return None
        return subject


_default_provider: Optional[IdentityProvider] = None


def get_identity_provider() -> IdentityProvider:
    """Dependency returning the process-wide identity provider."""
    global _default_provider
    if _default_provider is None:
        _default_provider = JWTIdentityProvider(AUTH_SECRET)
    return _default_provider
