#!/usr/bin/env python3
"""
Intake Gate
Decides whether an incoming Slack message carries a report worth processing
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from models import InboundEvent, RelaySettings, ReportFile
from .formatter import format_day_restriction_notice

logger = logging.getLogger(__name__)

PDF_MIMETYPE = "application/pdf"
REPORT_EXTENSIONS = (".pdf",)

DAY_NAMES = {
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "thu": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
    "sun": "Sunday",
}
WEEKDAY_KEYS = list(DAY_NAMES)  # index matches datetime.weekday()


def normalize_weekday(value) -> str:
    """
    Canonical three-letter day key ("fri") for a configured day

    Accepts "fri", "Friday" or a cron-style number where 0 is Monday, so the
    same value works for the intake gate and for APScheduler's day_of_week.

    Raises:
        ValueError: the value names no weekday
    """
    key = str(value).strip().lower()
    if key.isdigit() and int(key) < len(WEEKDAY_KEYS):
        return WEEKDAY_KEYS[int(key)]
    if key in DAY_NAMES:
        return key
    for day_key, day_name in DAY_NAMES.items():
        if key == day_name.lower():
            return day_key
    raise ValueError(f"Unknown weekday: {value!r}")


class GateOutcome(str, Enum):
    FILTERED_OUT = "filtered_out"
    FILTERED_OUT_NOTIFIED = "filtered_out_notified"
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome
    reason: str
    report_file: Optional[ReportFile] = None
    notice: Optional[str] = None  # only set for FILTERED_OUT_NOTIFIED

    @property
    def accepted(self) -> bool:
        return self.outcome is GateOutcome.ACCEPTED


def is_pdf(report_file: ReportFile) -> bool:
    return report_file.mimetype == PDF_MIMETYPE or report_file.name.lower().endswith(REPORT_EXTENSIONS)


class IntakeGate:
    """
    Filters inbound file events
    Rejections are silent except for the deadline-day restriction
    """

    def __init__(self, settings: RelaySettings):
        self.settings = settings
        self.deadline_day_key = normalize_weekday(settings.deadline_day)

    def is_recognized_report(self, report_file: ReportFile) -> bool:
        name = report_file.name.lower()
        return any(keyword.lower() in name for keyword in self.settings.report_name_keywords)

    def find_candidate(self, event: InboundEvent) -> Optional[ReportFile]:
        """First PDF attachment of the event, if any"""
        return next((f for f in event.files if is_pdf(f)), None)

    def evaluate(self, event: InboundEvent, now: datetime) -> GateDecision:
        if not event.has_files:
            return GateDecision(GateOutcome.FILTERED_OUT, "message has no files")

        if self.settings.direct_messages_only and not event.is_direct_message:
            return GateDecision(GateOutcome.FILTERED_OUT, f"not a direct message (channel_type={event.channel_type or 'unknown'})")

        candidate = self.find_candidate(event)
        if candidate is None:
            return GateDecision(GateOutcome.FILTERED_OUT, "no PDF attachment")

        if not self.is_recognized_report(candidate):
            logger.info(f"Ignoring non-Toggl PDF: {candidate.name}")
            return GateDecision(GateOutcome.FILTERED_OUT, f"unrecognized report name: {candidate.name}", candidate)

        if self.settings.restrict_to_deadline_day and WEEKDAY_KEYS[now.weekday()] != self.deadline_day_key:
            day_name = DAY_NAMES[self.deadline_day_key]
            return GateDecision(
                GateOutcome.FILTERED_OUT_NOTIFIED,
                f"reports are only processed on {day_name}",
                candidate,
                notice=format_day_restriction_notice(day_name),
            )

        return GateDecision(GateOutcome.ACCEPTED, "recognized report", candidate)
