#!/usr/bin/env python3
"""
FastAPI route handlers
"""

import logging
from fastapi import HTTPException, Request

from config import API_TITLE, API_VERSION
from models import relay_state
from scheduler import check_deadline, next_run_times, reset_week

logger = logging.getLogger(__name__)


async def root():
    """Root endpoint with API information"""
    return {
        "message": API_TITLE,
        "version": API_VERSION,
        "endpoints": {
            "/status": "Get relay status and statistics",
            "/tracker": "Get this week's tracker state",
            "/tracker/reset": "Reset the weekly tracker",
            "/reminder/check-now": "Run the deadline check immediately"
        }
    }


async def get_status(request: Request):
    """Get current relay status"""
    tracker = request.app.state.tracker
    return {
        "is_running": relay_state["is_running"],
        "last_event_at": relay_state["last_event_at"],
        "total_relayed": relay_state["total_relayed"],
        "total_filtered": relay_state["total_filtered"],
        "total_failed": relay_state["total_failed"],
        "tracker": tracker.get_stats(),
        "scheduled_jobs": next_run_times(getattr(request.app.state, "scheduler", None)),
        "recent_errors": relay_state["errors"][-5:]
    }


async def get_tracker(request: Request):
    """Get this week's tracker state"""
    return request.app.state.tracker.get_stats()


async def reset_tracker(request: Request):
    """Reset the weekly tracker (manual trigger)"""
    tracker = request.app.state.tracker
    reset_week(tracker)
    logger.info("Tracker reset by API request")
    return {
        "message": "Tracker reset successfully",
        "tracker": tracker.get_stats()
    }


async def check_now(request: Request):
    """Run the deadline check immediately (manual trigger)"""
    try:
        logger.info("🚀 Manual deadline check triggered")
        state = request.app.state
        sent = check_deadline(state.tracker, state.messenger, state.settings)
        return {
            "message": "Reminder sent" if sent else "No reminder sent",
            "reminder_sent": sent,
            "tracker": state.tracker.get_stats()
        }
    except Exception as e:
        logger.error(f"❌ Error in manual deadline check: {e}")
        raise HTTPException(status_code=500, detail=str(e))


def register_routes(app) -> None:
    """Attach the relay routes to a FastAPI app"""
    app.add_api_route("/", root, methods=["GET"])
    app.add_api_route("/status", get_status, methods=["GET"])
    app.add_api_route("/tracker", get_tracker, methods=["GET"])
    app.add_api_route("/tracker/reset", reset_tracker, methods=["POST"])
    app.add_api_route("/reminder/check-now", check_now, methods=["POST"])
