#!/usr/bin/env python3
"""
Relay pipeline
Intake -> download -> extract -> parse -> round -> format -> deliver -> track
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from document_text import extract_pdf_text
from errors import RelayError
from models import (
    InboundEvent,
    RawDuration,
    RelaySettings,
    ReportContext,
    RoundedDuration,
    record_error,
    relay_state,
)
from slack_client import SlackMessenger
from timesheet.duration_parser import parse_report_text
from timesheet.formatter import format_forward_confirmation, format_processing_error, format_time_message
from timesheet.intake_gate import GateOutcome, IntakeGate
from timesheet.rounding import round_to_nearest_minute
from timesheet.tracker import WeeklyTracker

logger = logging.getLogger(__name__)


class EventOutcome(str, Enum):
    FILTERED_OUT = "filtered_out"
    FILTERED_OUT_NOTIFIED = "filtered_out_notified"
    RELAYED = "relayed"
    FAILED = "failed"


@dataclass(frozen=True)
class RelayPlan:
    """Everything needed to relay one report, computed without I/O"""
    raw: RawDuration
    rounded: RoundedDuration
    context: ReportContext
    hr_message: str
    confirmation: str


@dataclass(frozen=True)
class ProcessResult:
    outcome: EventOutcome
    reason: str
    hr_message: Optional[str] = None


def plan_relay(text: str, source_file_name: str, settings: RelaySettings) -> RelayPlan:
    """
    Turn report text into the HR summary and the manager confirmation

    Raises:
        ParseError: the report text has no usable TOTAL HOURS line
    """
    parsed = parse_report_text(text)
    raw = parsed.duration
    logger.info(f"Extracted time: {raw.hours}:{raw.minutes:02d}:{raw.seconds:02d}")

    rounded = round_to_nearest_minute(raw)
    logger.info(f"Rounded time: {rounded.hours}h {rounded.minutes}m")

    context = ReportContext(source_file_name=source_file_name, date_range_label=parsed.date_range)
    hr_message = format_time_message(settings.employee_name, rounded, context.date_range_label)
    confirmation = format_forward_confirmation(settings.employee_name, settings.hr_display_name, hr_message)
    return RelayPlan(raw=raw, rounded=rounded, context=context, hr_message=hr_message, confirmation=confirmation)


class RelayPipeline:
    """
    Runs one Slack event end to end

    Collaborators are injected so tests can swap the network out:
        fetch_file: url -> bytes, raising RetrievalError
        extract_text: bytes -> str, raising ExtractionError
    """

    def __init__(
        self,
        settings: RelaySettings,
        tracker: WeeklyTracker,
        messenger: SlackMessenger,
        fetch_file: Callable[[str], bytes],
        extract_text: Callable[[bytes], str] = extract_pdf_text,
    ):
        self.settings = settings
        self.tracker = tracker
        self.messenger = messenger
        self.fetch_file = fetch_file
        self.extract_text = extract_text
        self.gate = IntakeGate(settings)

    def notify_sender(self, channel: str, text: str) -> bool:
        """Best effort message back to the sender; failures are only logged"""
        if not channel:
            return False
        try:
            self.messenger.post_message(channel, text)
            return True
        except Exception as e:
            logger.error(f"❌ Could not notify sender in {channel}: {e}")
            return False

    def _fail(self, error: Exception) -> ProcessResult:
        relay_state["total_failed"] += 1
        record_error(f"{type(error).__name__}: {error}")
        return ProcessResult(EventOutcome.FAILED, str(error))

    def process_event(self, event: InboundEvent, now: datetime) -> ProcessResult:
        relay_state["last_event_at"] = now.isoformat()

        decision = self.gate.evaluate(event, now)
        if decision.outcome is GateOutcome.FILTERED_OUT:
            logger.debug(f"📭 Event filtered out: {decision.reason}")
            relay_state["total_filtered"] += 1
            return ProcessResult(EventOutcome.FILTERED_OUT, decision.reason)

        if decision.outcome is GateOutcome.FILTERED_OUT_NOTIFIED:
            logger.info(f"📅 Event filtered out with notice: {decision.reason}")
            relay_state["total_filtered"] += 1
            self.notify_sender(event.channel, decision.notice)
            return ProcessResult(EventOutcome.FILTERED_OUT_NOTIFIED, decision.reason)

        report_file = decision.report_file
        logger.info(f"📄 Processing Toggl PDF: {report_file.name}")

        try:
            pdf_bytes = self.fetch_file(report_file.url_private)
            text = self.extract_text(pdf_bytes)
            plan = plan_relay(text, report_file.name, self.settings)
        except RelayError as e:
            logger.error(f"❌ Error processing timesheet {report_file.name}: {e}")
            self.notify_sender(event.channel, format_processing_error(str(e)))
            return self._fail(e)
        except Exception as e:
            logger.exception(f"❌ Unexpected error processing timesheet {report_file.name}: {e}")
            self.notify_sender(event.channel, format_processing_error(str(e)))
            return self._fail(e)

        try:
            self.messenger.post_message(self.settings.hr_user_id, plan.hr_message)
        except Exception as e:  # DeliveryError, or an unexpected client failure
            logger.error(f"❌ Failed to send summary to {self.settings.hr_display_name}: {e}")
            self.notify_sender(
                event.channel,
                f"I couldn't forward {self.settings.employee_name}'s time to "
                f"{self.settings.hr_display_name}: {e}"
            )
            return self._fail(e)

        self.tracker.mark_received(now)
        relay_state["total_relayed"] += 1
        logger.info(f"✅ Sent to {self.settings.hr_display_name}: {plan.hr_message}")

        self.notify_sender(event.channel, plan.confirmation)
        return ProcessResult(EventOutcome.RELAYED, "relayed", plan.hr_message)
