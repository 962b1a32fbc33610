#!/usr/bin/env python3
"""
Slack Bolt listener: feeds DM file uploads into the relay pipeline
"""

import logging
from datetime import datetime
from threading import Lock
from typing import Any, Dict
from zoneinfo import ZoneInfo

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from config import SLACK_APP_TOKEN, SLACK_BOT_TOKEN, SLACK_SIGNING_SECRET, TIMEZONE
from models import InboundEvent, record_error
from pipeline import ProcessResult, RelayPipeline
from timesheet.formatter import format_processing_error

logger = logging.getLogger(__name__)

# One report is processed fully before the next one starts
_processing_lock = Lock()


def create_bolt_app(token: str = SLACK_BOT_TOKEN, signing_secret: str = SLACK_SIGNING_SECRET) -> App:
    return App(token=token, signing_secret=signing_secret)


def handle_message_event(event: Dict[str, Any], pipeline: RelayPipeline, timezone: str = TIMEZONE) -> ProcessResult:
    """Run a raw Slack message event through the pipeline"""
    inbound = InboundEvent.from_slack_event(event)
    with _processing_lock:
        now = datetime.now(ZoneInfo(timezone))
        return pipeline.process_event(inbound, now)


def register_listeners(app: App, pipeline: RelayPipeline, timezone: str = TIMEZONE) -> None:
    @app.event("message")
    def on_message(event):
        try:
            result = handle_message_event(event, pipeline, timezone)
            logger.debug(f"Message event finished: {result.outcome.value} ({result.reason})")
        except Exception as e:
            logger.exception(f"❌ Unexpected error handling message event: {e}")
            record_error(str(e))
            if event.get("files"):
                pipeline.notify_sender(event.get("channel") or "", format_processing_error(str(e)))


def start_socket_mode(app: App, app_token: str = SLACK_APP_TOKEN) -> SocketModeHandler:
    """Open the Socket Mode connection without blocking the caller"""
    handler = SocketModeHandler(app, app_token)
    handler.connect()
    logger.info("✅ Connected to Slack (Socket Mode)")
    return handler
