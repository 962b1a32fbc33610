import pytest
from slack_bolt import App
from slack_bolt.authorization import AuthorizeResult
from slack_bolt.request import BoltRequest

from models import InboundEvent, ReportFile, relay_state
from pipeline import EventOutcome, ProcessResult
from bot import handle_message_event, register_listeners

SLACK_EVENT = {
    "type": "message",
    "channel": "D024BE91L",
    "channel_type": "im",
    "user": "U2147483697",
    "text": "",
    "files": [
        {
            "id": "F0S43P1CZ",
            "name": "Toggl_Track_summary_report_2024-01-05_2024-01-11.pdf",
            "mimetype": "application/pdf",
            "url_private": "https://files.slack.com/files-pri/T0-F0S43P1CZ/toggl.pdf",
        }
    ],
}


class RecordingPipeline:
    def __init__(self):
        self.calls = []

    def process_event(self, event, now):
        self.calls.append((event, now))
        return ProcessResult(EventOutcome.RELAYED, "relayed")


def test_inbound_event_from_slack_event():
    event = InboundEvent.from_slack_event(SLACK_EVENT)
    assert event.channel == "D024BE91L"
    assert event.is_direct_message
    assert event.files == (
        ReportFile(
            name="Toggl_Track_summary_report_2024-01-05_2024-01-11.pdf",
            mimetype="application/pdf",
            url_private="https://files.slack.com/files-pri/T0-F0S43P1CZ/toggl.pdf",
        ),
    )


def test_inbound_event_without_files():
    event = InboundEvent.from_slack_event({"type": "message", "channel": "C1", "text": "hi"})
    assert not event.has_files
    assert not event.is_direct_message


def test_handle_message_event_uses_configured_timezone():
    pipeline = RecordingPipeline()

    result = handle_message_event(SLACK_EVENT, pipeline, timezone="America/Chicago")

    assert result.outcome is EventOutcome.RELAYED
    (event, now), = pipeline.calls
    assert event.user == "U2147483697"
    assert str(now.tzinfo) == "America/Chicago"


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)

    def authorize(enterprise_id, team_id, user_id):
        return AuthorizeResult(
            enterprise_id=enterprise_id,
            team_id=team_id,
            bot_token="xoxb-test",
            bot_user_id="UBOT",
            bot_id="BBOT",
        )

    return App(signing_secret="test-secret", authorize=authorize, process_before_response=True)


def dispatch_message(app, event):
    body = {
        "token": "verification-token",
        "team_id": "T0001",
        "api_app_id": "A0001",
        "type": "event_callback",
        "event_id": "Ev0001",
        "event_time": 1704985200,
        "event": event,
    }
    return app.dispatch(BoltRequest(body=body, mode="socket_mode"))


class ExplodingPipeline(RecordingPipeline):
    def __init__(self):
        super().__init__()
        self.notices = []

    def process_event(self, event, now):
        raise RuntimeError("unexpected failure")

    def notify_sender(self, channel, text):
        self.notices.append((channel, text))
        return True


def test_registered_listener_runs_pipeline(app):
    pipeline = RecordingPipeline()
    register_listeners(app, pipeline, timezone="UTC")

    response = dispatch_message(app, SLACK_EVENT)

    assert response.status == 200
    (event, now), = pipeline.calls
    assert event.channel == "D024BE91L"
    assert event.files[0].name.startswith("Toggl_Track")


def test_listener_tells_sender_about_unexpected_errors(app):
    pipeline = ExplodingPipeline()
    register_listeners(app, pipeline, timezone="UTC")

    dispatch_message(app, SLACK_EVENT)

    assert pipeline.notices == [
        ("D024BE91L", "I had trouble processing that PDF: unexpected failure\n\n"
                      "Please check that it's a valid Toggl summary report.")
    ]
    assert relay_state["errors"][-1]["error"] == "unexpected failure"


def test_listener_stays_quiet_for_failing_messages_without_files(app):
    pipeline = ExplodingPipeline()
    register_listeners(app, pipeline, timezone="UTC")

    dispatch_message(app, {"type": "message", "channel": "D024BE91L", "channel_type": "im", "user": "U1", "text": "hi"})

    assert pipeline.notices == []
