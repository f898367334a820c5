"""Session-wide API credit counters.

One CreditTracker belongs to one client instance and is shared by every
sub-client and in-flight request of that client. Updates are serialized
with a lock, so the tracker is safe under asyncio tasks and under threads.
"""

from __future__ import annotations

import logging
import threading

from ...models import AccountInfo, AccountUsage

logger = logging.getLogger(__name__)


class CreditTracker:
    """Accumulates credit usage reported by API responses.

    ``session_credits_used`` is a running sum of per-call usage.
    ``remaining_credits`` is a snapshot, overwritten by each response.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session_credits_used = 0
        self._remaining_credits = 0

    def record(self, account: AccountInfo | None) -> None:
        """Fold one response's usage metadata into the counters.

        No-op when ``account`` is None. Each field is applied only when the
        server reported it.
        """
        if account is None:
            return

        with self._lock:
            if account.est_credits_used is not None:
                self._session_credits_used += account.est_credits_used
            if account.est_remaining_credits is not None:
                self._remaining_credits = account.est_remaining_credits
            session_total = self._session_credits_used

        logger.debug(
            "credits_recorded",
            extra={
                "credits_used": account.est_credits_used,
                "remaining_credits": account.est_remaining_credits,
                "session_credits_used": session_total,
            },
        )

    def snapshot(self) -> AccountUsage:
        """Return the current counters."""
        with self._lock:
            return AccountUsage(
                est_session_credits_used=self._session_credits_used,
                est_remaining_credits=self._remaining_credits,
            )

    @property
    def session_credits_used(self) -> int:
        with self._lock:
            return self._session_credits_used

    @property
    def remaining_credits(self) -> int:
        with self._lock:
            return self._remaining_credits
