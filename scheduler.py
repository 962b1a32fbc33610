#!/usr/bin/env python3
"""
Weekly scheduled jobs: deadline reminder and tracker reset
"""

import logging
from typing import Optional

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from config import DEADLINE_DAY, DEADLINE_HOUR, DEADLINE_MINUTE, RESET_DAY, RESET_HOUR, RESET_MINUTE, TIMEZONE
from errors import DeliveryError
from models import RelaySettings, record_error
from slack_client import SlackMessenger
from timesheet.formatter import format_missing_report_reminder
from timesheet.intake_gate import normalize_weekday
from timesheet.tracker import WeeklyTracker

logger = logging.getLogger(__name__)

DEADLINE_JOB_ID = "deadline_check"
RESET_JOB_ID = "weekly_reset"


def check_deadline(tracker: WeeklyTracker, messenger: SlackMessenger, settings: RelaySettings) -> bool:
    """
    Remind the manager when no report was relayed this week

    Returns:
        True if a reminder was sent
    """
    if tracker.is_satisfied:
        logger.info("✅ Deadline check: this week's timesheet was already relayed")
        return False

    logger.info(f"⏰ Deadline check: no timesheet from {settings.employee_name} yet, sending reminder")
    try:
        messenger.post_message(
            settings.manager_user_id,
            format_missing_report_reminder(settings.employee_name, settings.hr_display_name)
        )
    except DeliveryError as e:
        logger.error(f"❌ Failed to send reminder: {e}")
        record_error(f"DeliveryError: {e}")
        return False
    return True


def reset_week(tracker: WeeklyTracker) -> None:
    logger.info("🔄 Starting a new tracking week")
    tracker.reset()


def create_scheduler(
    tracker: WeeklyTracker,
    messenger: SlackMessenger,
    settings: RelaySettings,
    timezone: str = TIMEZONE,
    deadline_day: str = DEADLINE_DAY,
    deadline_hour: int = DEADLINE_HOUR,
    deadline_minute: int = DEADLINE_MINUTE,
    reset_day: str = RESET_DAY,
    reset_hour: int = RESET_HOUR,
    reset_minute: int = RESET_MINUTE,
) -> BackgroundScheduler:
    """Build (but do not start) the scheduler with both weekly jobs"""
    deadline_day = normalize_weekday(deadline_day)
    reset_day = normalize_weekday(reset_day)
    scheduler = BackgroundScheduler(
        executors={"default": ThreadPoolExecutor(max_workers=1)},
        timezone=timezone,
    )
    scheduler.add_job(
        check_deadline,
        CronTrigger(day_of_week=deadline_day, hour=deadline_hour, minute=deadline_minute, timezone=timezone),
        args=[tracker, messenger, settings],
        id=DEADLINE_JOB_ID,
        name="Weekly timesheet deadline check",
        replace_existing=True,
    )
    scheduler.add_job(
        reset_week,
        CronTrigger(day_of_week=reset_day, hour=reset_hour, minute=reset_minute, timezone=timezone),
        args=[tracker],
        id=RESET_JOB_ID,
        name="Weekly tracker reset",
        replace_existing=True,
    )
    logger.info(f"Deadline check: {deadline_day} {deadline_hour:02d}:{deadline_minute:02d} ({timezone})")
    logger.info(f"Weekly reset: {reset_day} {reset_hour:02d}:{reset_minute:02d} ({timezone})")
    return scheduler


def next_run_times(scheduler: Optional[BackgroundScheduler]) -> dict:
    """Next fire time of each job, for the status endpoint"""
    if scheduler is None or not scheduler.running:
        return {}
    out = {}
    for job in scheduler.get_jobs():
        out[job.id] = job.next_run_time.isoformat() if job.next_run_time else None
    return out
