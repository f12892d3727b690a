"""
Newsletter services for e-mail sign-ups.
"""
import logging
import re
from collections import Counter
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from post_service.models import NewsletterSubscription
from .models import DEFAULT_SOURCE, SUBSCRIPTION_SOURCES, SubscribeResult, SubscribeStatus

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


class NewsletterService:
    """Keeps newsletter subscriptions for the lifetime of the process."""

    def __init__(self):
        self._subscriptions: Dict[str, NewsletterSubscription] = {}
        self._lock = Lock()

    @staticmethod
    def normalize_email(email: Optional[str]) -> str:
        return (email or "").strip().lower()

    @staticmethod
    def is_valid_email(email: str) -> bool:
        return bool(EMAIL_PATTERN.match(email))

    def subscribe(self, email: Optional[str], source: Optional[str] = None) -> SubscribeResult:
        """
        Register an e-mail address.

        Args:
            email: Address as typed into the form
            source: Which form was used ("hero" or "newsletter")

        Returns:
            SubscribeResult describing the outcome
        """
        normalized = self.normalize_email(email)
        if not self.is_valid_email(normalized):
            logger.info("Rejected newsletter sign-up with invalid e-mail")
            return SubscribeResult(status=SubscribeStatus.INVALID_EMAIL)

        if source not in SUBSCRIPTION_SOURCES:
            source = DEFAULT_SOURCE

        with self._lock:
            if normalized in self._subscriptions:
                return SubscribeResult(
                    status=SubscribeStatus.ALREADY_SUBSCRIBED,
                    email=normalized,
                    source=self._subscriptions[normalized].source,
                )
            self._subscriptions[normalized] = NewsletterSubscription(
                email=normalized,
                source=source,
                subscribed_at=datetime.now(timezone.utc).isoformat(),
            )

        logger.info(f"Newsletter sign-up: {normalized} via {source}")
        return SubscribeResult(status=SubscribeStatus.SUBSCRIBED, email=normalized, source=source)

    def is_subscribed(self, email: str) -> bool:
        with self._lock:
            return self.normalize_email(email) in self._subscriptions

    def get_subscriptions(self) -> List[NewsletterSubscription]:
        """All subscriptions in sign-up order."""
        with self._lock:
            return list(self._subscriptions.values())

    def get_stats(self) -> Dict[str, Any]:
        """Subscription totals, overall and per form."""
        subscriptions = self.get_subscriptions()
        by_source = Counter(s.source for s in subscriptions)
        return {
            "total": len(subscriptions),
            "by_source": {source: by_source.get(source, 0) for source in SUBSCRIPTION_SOURCES},
        }
