#!/usr/bin/env python3
"""
Configuration settings for the Timesheet Relay
"""

import os
from dotenv import load_dotenv

from models import RelaySettings
from timesheet.intake_gate import normalize_weekday

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_list(name: str, default: str):
    return [item.strip().lower() for item in os.getenv(name, default).split(",") if item.strip()]


# === Slack Configuration ===
SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN", "")
SLACK_APP_TOKEN = os.getenv("SLACK_APP_TOKEN", "")  # Socket Mode app-level token
SLACK_SIGNING_SECRET = os.getenv("SLACK_SIGNING_SECRET", "")

# === Recipients ===
MANAGER_USER_ID = os.getenv("MANAGER_USER_ID", "")  # Receives reminders and confirmations
HR_USER_ID = os.getenv("HR_USER_ID", "")  # Receives the relayed summary
HR_DISPLAY_NAME = os.getenv("HR_DISPLAY_NAME", "HR")
EMPLOYEE_NAME = os.getenv("EMPLOYEE_NAME", "Roxie")

# === Intake Configuration ===
REPORT_NAME_KEYWORDS = _env_list("REPORT_NAME_KEYWORDS", "toggl,track,summary")
DIRECT_MESSAGES_ONLY = _env_bool("DIRECT_MESSAGES_ONLY", "true")
RESTRICT_TO_DEADLINE_DAY = _env_bool("RESTRICT_TO_DEADLINE_DAY", "false")
DOWNLOAD_TIMEOUT = int(os.getenv("DOWNLOAD_TIMEOUT", "30"))  # seconds

# === Schedule Configuration ===
TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
DEADLINE_DAY = normalize_weekday(os.getenv("DEADLINE_DAY", "fri"))
DEADLINE_HOUR = int(os.getenv("DEADLINE_HOUR", "17"))
DEADLINE_MINUTE = int(os.getenv("DEADLINE_MINUTE", "0"))
RESET_DAY = normalize_weekday(os.getenv("RESET_DAY", "mon"))
RESET_HOUR = int(os.getenv("RESET_HOUR", "0"))
RESET_MINUTE = int(os.getenv("RESET_MINUTE", "0"))

# === API Configuration ===
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8006"))
API_TITLE = "Timesheet Relay API"
API_DESCRIPTION = "Relays Toggl timesheet totals from Slack DMs to HR"
API_VERSION = "1.0.0"

# === Logging Configuration ===
LOG_FILE = os.getenv("LOG_FILE", "timesheet_relay.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_settings():
    """Collect the runtime relay settings from the environment constants"""
    return RelaySettings(
        employee_name=EMPLOYEE_NAME,
        hr_user_id=HR_USER_ID,
        hr_display_name=HR_DISPLAY_NAME,
        manager_user_id=MANAGER_USER_ID,
        report_name_keywords=tuple(REPORT_NAME_KEYWORDS),
        restrict_to_deadline_day=RESTRICT_TO_DEADLINE_DAY,
        deadline_day=DEADLINE_DAY,
        direct_messages_only=DIRECT_MESSAGES_ONLY,
    )
