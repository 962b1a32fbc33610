#!/usr/bin/env python3
"""
Slack client operations: private file download and message posting
"""

import logging

import requests
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from config import DOWNLOAD_TIMEOUT
from errors import DeliveryError, RetrievalError

logger = logging.getLogger(__name__)


def download_file(url: str, token: str, timeout: int = DOWNLOAD_TIMEOUT) -> bytes:
    """
    Download a private Slack file (single attempt, no retry)

    Args:
        url: The file's url_private
        token: Bot token with files:read scope

    Returns:
        Raw file bytes

    Raises:
        RetrievalError: network failure, auth failure or missing file
    """
    if not url:
        raise RetrievalError("the file has no download URL")

    try:
        response = requests.get(
            url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout
        )
    except requests.RequestException as e:
        raise RetrievalError(f"download failed: {e}") from e

    if response.status_code in (401, 403):
        raise RetrievalError(f"not authorized to download the file (HTTP {response.status_code})")
    if response.status_code == 404:
        raise RetrievalError("the file was not found (HTTP 404)")
    if response.status_code != 200:
        raise RetrievalError(f"download failed with status {response.status_code}: {response.text[:200]}")

    # Slack answers an unauthenticated request with its HTML sign-in page
    if response.headers.get("Content-Type", "").startswith("text/html"):
        raise RetrievalError("Slack returned a sign-in page instead of the file; check the bot token's files:read scope")

    logger.info(f"Downloaded {len(response.content)} bytes")
    return response.content


class SlackMessenger:
    """Posts messages through a slack_sdk WebClient"""

    def __init__(self, client: WebClient):
        self.client = client

    def post_message(self, channel: str, text: str) -> None:
        """
        Raises:
            DeliveryError: Slack rejected the message or was unreachable
        """
        if not channel:
            raise DeliveryError("no destination channel configured")
        try:
            self.client.chat_postMessage(channel=channel, text=text)
        except SlackApiError as e:
            raise DeliveryError(f"Slack API error: {e.response['error']}") from e
        except OSError as e:  # urllib.error.URLError and socket timeouts
            raise DeliveryError(f"Slack unreachable: {e}") from e
        logger.debug(f"Posted message to {channel}")
