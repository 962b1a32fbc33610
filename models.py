#!/usr/bin/env python3
"""
Data models and type definitions
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

DEFAULT_DATE_RANGE_LABEL = "this week"


@dataclass(frozen=True)
class RawDuration:
    """Total duration exactly as printed in the report (H:MM:SS)"""
    hours: int
    minutes: int
    seconds: int

    def __post_init__(self):
        if not 0 <= self.hours <= 999:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes out of range: {self.minutes}")
        if not 0 <= self.seconds <= 59:
            raise ValueError(f"seconds out of range: {self.seconds}")


@dataclass(frozen=True)
class RoundedDuration:
    hours: int
    minutes: int

    def __post_init__(self):
        if self.hours < 0:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes out of range: {self.minutes}")


@dataclass(frozen=True)
class ParsedReport:
    duration: RawDuration
    date_range: str = DEFAULT_DATE_RANGE_LABEL


@dataclass(frozen=True)
class ReportContext:
    """Provenance of a relayed summary"""
    source_file_name: str
    date_range_label: str = DEFAULT_DATE_RANGE_LABEL


@dataclass(frozen=True)
class TrackerState:
    received: bool = False
    last_received_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReportFile:
    name: str
    mimetype: str = ""
    url_private: str = ""

    @classmethod
    def from_slack_file(cls, data: Dict[str, Any]) -> "ReportFile":
        return cls(
            name=data.get("name") or "",
            mimetype=data.get("mimetype") or "",
            url_private=data.get("url_private") or "",
        )


@dataclass(frozen=True)
class InboundEvent:
    """The parts of a Slack message event the relay cares about"""
    channel: str = ""
    channel_type: str = ""
    user: str = ""
    files: Tuple[ReportFile, ...] = ()

    @property
    def has_files(self) -> bool:
        return len(self.files) > 0

    @property
    def is_direct_message(self) -> bool:
        return self.channel_type == "im"

    @classmethod
    def from_slack_event(cls, event: Dict[str, Any]) -> "InboundEvent":
        return cls(
            channel=event.get("channel") or "",
            channel_type=event.get("channel_type") or "",
            user=event.get("user") or "",
            files=tuple(ReportFile.from_slack_file(f) for f in event.get("files") or []),
        )


@dataclass(frozen=True)
class RelaySettings:
    employee_name: str = "Roxie"
    hr_user_id: str = ""
    hr_display_name: str = "HR"
    manager_user_id: str = ""
    report_name_keywords: Tuple[str, ...] = ("toggl", "track", "summary")
    restrict_to_deadline_day: bool = False
    deadline_day: str = "fri"
    direct_messages_only: bool = True


# === Global State ===
relay_state = {
    "is_running": False,
    "last_event_at": None,
    "total_relayed": 0,
    "total_filtered": 0,
    "total_failed": 0,
    "errors": []
}


def record_error(error: str) -> None:
    """Append an error to relay_state, keeping only the last 10"""
    relay_state["errors"].append({
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "error": error
    })
    relay_state["errors"] = relay_state["errors"][-10:]
