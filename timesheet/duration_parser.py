#!/usr/bin/env python3
"""
Duration Parser
Extracts the TOTAL HOURS figure and the report date range from Toggl summary text
"""

import re
import logging
from typing import Optional

from errors import ParseError
from models import DEFAULT_DATE_RANGE_LABEL, ParsedReport, RawDuration

logger = logging.getLogger(__name__)

# "TOTAL HOURS: 37:15:45", hours 1-3 digits, minutes/seconds exactly 2
TOTAL_HOURS_RX = re.compile(
    r"TOTAL\s+HOURS\s*[:\-=]?\s*"
    r"(?P<hours>\d{1,3}):(?P<minutes>\d{2}):(?P<seconds>\d{2})(?!\d)",
    re.I,
)
# "01/05/2024 - 01/11/2024"
DATE_RANGE_RX = re.compile(r"(?P<start>\d{2}/\d{2}/\d{4})\s*-\s*(?P<end>\d{2}/\d{2}/\d{4})")


def extract_total_duration(text: str) -> RawDuration:
    """
    Find the total duration in report text

    Args:
        text: Plain text extracted from the report

    Returns:
        RawDuration with hours, minutes and seconds as printed

    Raises:
        ParseError: marker missing or the value is out of range
    """
    m = TOTAL_HOURS_RX.search(text or "")
    if not m:
        raise ParseError(
            "total duration marker not found: expected a line like "
            "'TOTAL HOURS: 12:34:56', so this does not look like a valid export"
        )

    try:
        duration = RawDuration(
            hours=int(m.group("hours"), 10),
            minutes=int(m.group("minutes"), 10),
            seconds=int(m.group("seconds"), 10),
        )
    except ValueError as e:
        raise ParseError(f"total duration '{m.group(0).strip()}' is not a valid H:MM:SS value ({e})") from e

    logger.debug(f"Extracted total duration: {duration}")
    return duration


def extract_date_range(text: str) -> Optional[str]:
    """Return the report's 'MM/DD/YYYY - MM/DD/YYYY' range, or None"""
    m = DATE_RANGE_RX.search(text or "")
    if not m:
        return None
    return f"{m.group('start')} - {m.group('end')}"


def parse_report_text(text: str) -> ParsedReport:
    """
    Parse report text into a duration and a date range label

    A missing date range falls back to the generic label; only a missing
    total duration fails the parse.
    """
    duration = extract_total_duration(text)
    date_range = extract_date_range(text)
    if date_range is None:
        logger.info("No date range found in report, using '%s'", DEFAULT_DATE_RANGE_LABEL)
        date_range = DEFAULT_DATE_RANGE_LABEL
    return ParsedReport(duration=duration, date_range=date_range)
