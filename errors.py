#!/usr/bin/env python3
"""
Error taxonomy for the relay pipeline

Every error is terminal for the event that raised it and is reported once.
"""


class RelayError(Exception):
    """Base class for failures while relaying a single report"""


class RetrievalError(RelayError):
    """The report file bytes could not be fetched (network, auth, not found)"""


class ExtractionError(RelayError):
    """The fetched bytes are not a readable PDF document"""


class ParseError(RelayError):
    """The report text does not contain a usable total duration"""


class DeliveryError(RelayError):
    """A Slack message could not be posted"""
