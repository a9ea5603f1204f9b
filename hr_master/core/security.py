"""
Credential verification strategies.

Stored employee and admin credentials are plaintext (legacy schema), so the only
shipped strategy compares plaintext values. Call sites depend on the
CredentialVerifier protocol, so a salted-hash verifier can be registered here
without touching the login service.
"""
import hmac
import logging
from typing import Dict, Optional, Protocol

from hr_master.core.config import settings

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    def verify(self, provided: str, stored: Optional[str]) -> bool:
        ...


class LegacyPlaintextAuth:
    """Compares the provided password against the stored plaintext value."""

    name = "legacy_plaintext"

    def verify(self, provided: str, stored: Optional[str]) -> bool:
        if not provided or stored is None:
            return False
        return hmac.compare_digest(provided.encode("utf-8"), stored.encode("utf-8"))


_STRATEGIES: Dict[str, CredentialVerifier] = {
    LegacyPlaintextAuth.name: LegacyPlaintextAuth(),
}


def get_verifier(name: Optional[str] = None) -> CredentialVerifier:
    strategy = name or settings.auth_strategy
    try:
        return _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown auth strategy: {strategy}") from None
