import pytest

from errors import DeliveryError
from models import RelaySettings, relay_state


class FakeMessenger:
    """Records posted messages; channels in fail_channels raise DeliveryError"""

    def __init__(self, fail_channels=()):
        self.sent = []
        self.fail_channels = set(fail_channels)

    def post_message(self, channel, text):
        if channel in self.fail_channels:
            raise DeliveryError("Slack API error: channel_not_found")
        self.sent.append((channel, text))

    def texts_to(self, channel):
        return [text for ch, text in self.sent if ch == channel]


@pytest.fixture(autouse=True)
def clean_relay_state():
    relay_state.update({
        "is_running": False,
        "last_event_at": None,
        "total_relayed": 0,
        "total_filtered": 0,
        "total_failed": 0,
        "errors": []
    })
    yield


@pytest.fixture
def settings():
    return RelaySettings(
        employee_name="Roxie",
        hr_user_id="UHR",
        hr_display_name="Erickia",
        manager_user_id="UMANAGER",
    )


@pytest.fixture
def messenger():
    return FakeMessenger()
