"""
Newsletter models for sign-up results.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


SUBSCRIPTION_SOURCES = ("hero", "newsletter")
DEFAULT_SOURCE = "newsletter"


class SubscribeStatus(str, Enum):
    """Outcome of a sign-up attempt."""
    SUBSCRIBED = "subscribed"
    ALREADY_SUBSCRIBED = "already-subscribed"
    INVALID_EMAIL = "invalid-email"


@dataclass
class SubscribeResult:
    """Result of a sign-up attempt."""
    status: SubscribeStatus
    email: Optional[str] = None
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != SubscribeStatus.INVALID_EMAIL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        if not self.ok:
            return {"error": self.status.value}
        return {
            "status": self.status.value,
            "email": self.email,
            "source": self.source,
        }
