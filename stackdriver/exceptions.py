"""
Errors raised by the Stackdriver client.
"""
from typing import Optional


class StackdriverError(Exception):
    """Base class for every error raised by this package."""


class SerializationError(StackdriverError):
    """A payload could not be encoded as JSON."""


class TransportError(StackdriverError):
    """The request failed before any HTTP response was received."""


class RemoteRejectionError(StackdriverError):
    """The gateway answered with a status code outside the accepted set."""

    def __init__(self, url: str, status_code: int, body: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.body = body
        message = f"Unable to send to Stackdriver API ({url}). HTTP response code: {status_code}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class StaleMetricError(StackdriverError, ValueError):
    """A metric point was collected too long ago to be accepted."""

    def __init__(self, collected_at: int, max_age: int):
        self.collected_at = collected_at
        self.max_age = max_age
        super().__init__(
            f"Metric collected_at value {collected_at} is older than {max_age} seconds"
        )
