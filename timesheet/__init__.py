"""
Timesheet Module
Parsing, rounding, formatting and intake rules for relayed Toggl reports
"""

from .duration_parser import parse_report_text, extract_total_duration, extract_date_range
from .rounding import round_to_nearest_minute
from .formatter import format_duration_phrase, format_time_message
from .tracker import WeeklyTracker, TrackerStatus
from .intake_gate import IntakeGate, GateDecision, GateOutcome

__all__ = [
    'parse_report_text',
    'extract_total_duration',
    'extract_date_range',
    'round_to_nearest_minute',
    'format_duration_phrase',
    'format_time_message',
    'WeeklyTracker',
    'TrackerStatus',
    'IntakeGate',
    'GateDecision',
    'GateOutcome'
]
