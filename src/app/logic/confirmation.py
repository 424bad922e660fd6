"""Two-step delete confirmation.

The first click arms an id; a second click on the same id confirms it while
the arming is still fresh. Armed state expires on its own.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass
class PendingConfirmation:
    timeout: timedelta
    pending_id: str | None = None
    armed_at: datetime | None = None

    def active_id(self, now: datetime) -> str | None:
        """Currently armed id, or None once the timeout has passed."""
        if self.pending_id is None or self.armed_at is None:
            return None
        if now - self.armed_at >= self.timeout:
            self.reset()
            return None
        return self.pending_id

    def click(self, entry_id: str, now: datetime) -> bool:
        """Register a delete click. Returns True when the delete is confirmed."""
        if self.active_id(now) == entry_id:
            self.reset()
            return True
        self.pending_id = entry_id
        self.armed_at = now
        return False

    def reset(self) -> None:
        self.pending_id = None
        self.armed_at = None
