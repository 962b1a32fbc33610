#!/usr/bin/env python3
"""
Main FastAPI application - Entry point
"""

import logging
from fastapi import FastAPI

from config import API_HOST, API_PORT, API_TITLE, API_DESCRIPTION, API_VERSION, LOG_FILE, LOG_LEVEL, LOG_FORMAT
from config import SLACK_BOT_TOKEN, SLACK_APP_TOKEN, MANAGER_USER_ID, HR_USER_ID, TIMEZONE, RESTRICT_TO_DEADLINE_DAY
from config import build_settings
from models import relay_state
from api_endpoints import register_routes
from bot import create_bolt_app, register_listeners, start_socket_mode
from pipeline import RelayPipeline
from scheduler import create_scheduler
from slack_client import SlackMessenger, download_file
from timesheet.tracker import WeeklyTracker

# === Setup Logging ===
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format=LOG_FORMAT,
    handlers=[
        logging.FileHandler(LOG_FILE),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# === FastAPI App ===
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION
)

# === Register Routes ===
register_routes(app)


@app.on_event("startup")
async def startup_event():
    """Wire the tracker, Slack listener and scheduler together"""
    logger.info("=" * 70)
    logger.info(f"🚀 {API_TITLE} Started")
    logger.info("=" * 70)
    logger.info(f"Listening for Toggl PDFs sent to manager ({MANAGER_USER_ID})")
    logger.info(f"Will forward rounded times to HR ({HR_USER_ID})")
    logger.info(f"Time zone: {TIMEZONE}")
    logger.info(f"Deadline-day restriction: {'on' if RESTRICT_TO_DEADLINE_DAY else 'off'}")
    logger.info("=" * 70)

    settings = build_settings()
    tracker = WeeklyTracker()
    bolt_app = create_bolt_app()
    messenger = SlackMessenger(bolt_app.client)
    pipeline = RelayPipeline(
        settings=settings,
        tracker=tracker,
        messenger=messenger,
        fetch_file=lambda url: download_file(url, SLACK_BOT_TOKEN),
    )
    register_listeners(bolt_app, pipeline)

    scheduler = create_scheduler(tracker, messenger, settings)
    scheduler.start()

    app.state.settings = settings
    app.state.tracker = tracker
    app.state.messenger = messenger
    app.state.scheduler = scheduler
    app.state.socket_handler = start_socket_mode(bolt_app)

    relay_state["is_running"] = True
    logger.info("✅ Timesheet bot is running!")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    relay_state["is_running"] = False
    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
    handler = getattr(app.state, "socket_handler", None)
    if handler is not None:
        handler.close()
    logger.info("=" * 70)
    logger.info(f"🛑 {API_TITLE} Stopped")
    logger.info(f"Total reports relayed: {relay_state['total_relayed']}")
    logger.info("=" * 70)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
