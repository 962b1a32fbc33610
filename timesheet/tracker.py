#!/usr/bin/env python3
"""
Weekly Tracker
Remembers whether this week's report has been relayed
States: PENDING --[mark_received]--> SATISFIED --[reset]--> PENDING
"""

import logging
from datetime import datetime
from enum import Enum
from threading import Lock
from typing import Any, Dict, Optional

from models import TrackerState

logger = logging.getLogger(__name__)


class TrackerStatus(str, Enum):
    PENDING = "pending"
    SATISFIED = "satisfied"


class WeeklyTracker:
    """
    Process-lifetime record of the current tracking period

    Shared between the Slack listener and the scheduler threads, so every
    read and write goes through the lock.
    """

    def __init__(self):
        self._lock = Lock()
        self._received = False
        self._last_received_at: Optional[datetime] = None

    def mark_received(self, at: datetime) -> None:
        """PENDING -> SATISFIED (or refresh the timestamp when already SATISFIED)"""
        with self._lock:
            self._received = True
            self._last_received_at = at
        logger.debug(f"Tracker satisfied at {at.isoformat()}")

    def reset(self) -> None:
        """Back to PENDING; safe to call from either state"""
        with self._lock:
            self._received = False
            self._last_received_at = None
        logger.debug("Tracker reset")

    def snapshot(self) -> TrackerState:
        with self._lock:
            return TrackerState(received=self._received, last_received_at=self._last_received_at)

    @property
    def status(self) -> TrackerStatus:
        return TrackerStatus.SATISFIED if self.snapshot().received else TrackerStatus.PENDING

    @property
    def is_satisfied(self) -> bool:
        return self.status is TrackerStatus.SATISFIED

    def get_stats(self) -> Dict[str, Any]:
        """Get the tracker state in a JSON friendly form"""
        state = self.snapshot()
        return {
            "status": (TrackerStatus.SATISFIED if state.received else TrackerStatus.PENDING).value,
            "received": state.received,
            "last_received_at": state.last_received_at.isoformat() if state.last_received_at else None
        }
