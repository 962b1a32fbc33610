#!/usr/bin/env python3
"""
Message Formatter
Renders the Slack messages sent to HR and back to the manager
"""

from models import RoundedDuration


def _plural(quantity: int, unit: str) -> str:
    return f"{quantity} {unit}{'' if quantity == 1 else 's'}"


def format_duration_phrase(rounded: RoundedDuration) -> str:
    """
    Human readable duration, e.g. "2 hours 1 minute"

    Zero clauses are dropped; a zero duration reads "0 minutes".
    """
    parts = []
    if rounded.hours > 0:
        parts.append(_plural(rounded.hours, "hour"))
    if rounded.minutes > 0:
        parts.append(_plural(rounded.minutes, "minute"))
    if not parts:
        return "0 minutes"
    return " ".join(parts)


def format_time_message(employee_name: str, rounded: RoundedDuration, date_range: str) -> str:
    """The summary relayed to HR"""
    return f"{employee_name}'s time for week of {date_range}: *{format_duration_phrase(rounded)}*"


def format_forward_confirmation(employee_name: str, hr_display_name: str, message: str) -> str:
    return f"I've forwarded {employee_name}'s time to {hr_display_name}:\n> {message}"


def format_processing_error(reason: str) -> str:
    return (
        f"I had trouble processing that PDF: {reason}\n\n"
        "Please check that it's a valid Toggl summary report."
    )


def format_day_restriction_notice(day_name: str) -> str:
    return (
        f"I only process timesheets on {day_name}s, so I didn't forward this one. "
        f"Please send the report again on {day_name}."
    )


def format_missing_report_reminder(employee_name: str, hr_display_name: str) -> str:
    return (
        f"Reminder: I haven't received {employee_name}'s timesheet for this week yet. "
        f"Send me the Toggl summary PDF and I'll forward it to {hr_display_name}."
    )
