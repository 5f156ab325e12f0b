"""
HTTP transport shared by the metric and event submitters.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import requests
from retrying import retry

from . import config
from .exceptions import RemoteRejectionError, SerializationError, TransportError

logger = logging.getLogger(__name__)

API_KEY_HEADER = 'x-stackdriver-apikey'


@dataclass(frozen=True)
class Endpoints:
    """Gateway URLs a transport posts to."""
    custom_metric: str = config.CUSTOM_METRIC_URL
    annotation_event: str = config.ANNOTATION_EVENT_URL
    deploy_event: str = config.DEPLOY_EVENT_URL


def retry_if_connection_error(exception: Exception) -> bool:
    """Return True if we should retry (in this case when it's a connection error)"""
    return isinstance(exception, (requests.ConnectionError, requests.Timeout))


class Transport:
    """POSTs JSON payloads to the Stackdriver gateways."""

    def __init__(
        self,
        api_key: str,
        endpoints: Optional[Endpoints] = None,
        user_agent: Optional[str] = None,
        request_timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the transport.

        Args:
            api_key (str): Value of the x-stackdriver-apikey header.
            endpoints (Endpoints, optional): Gateway URLs. Defaults to the config URLs.
            user_agent (str, optional): User-Agent header. Defaults to config.USER_AGENT.
            request_timeout (float, optional): Request timeout in seconds. Defaults to config.REQUEST_TIMEOUT.
            max_attempts (int, optional): Attempts per request on connection errors. Defaults to config.MAX_ATTEMPTS.
            retry_delay (float, optional): Delay between attempts in seconds. Defaults to config.RETRY_DELAY.
            session (requests.Session, optional): Session to issue requests with.
        """
        self.api_key = api_key
        self.endpoints = endpoints or Endpoints()
        self.user_agent = user_agent or config.USER_AGENT
        self.request_timeout = request_timeout if request_timeout is not None else config.REQUEST_TIMEOUT
        self.max_attempts = max(1, max_attempts if max_attempts is not None else config.MAX_ATTEMPTS)
        self.retry_delay = retry_delay if retry_delay is not None else config.RETRY_DELAY
        self.session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'User-Agent': self.user_agent,
            'Content-Type': 'application/json',
            API_KEY_HEADER: self.api_key,
        }

    def post_json(self, url: str, payload: Dict[str, Any], accepted_statuses: Iterable[int] = (200,)) -> int:
        """
        Encode a payload and POST it.

        Args:
            url (str): Gateway URL
            payload (dict): JSON-serializable request body
            accepted_statuses (iterable of int): Status codes counted as success

        Returns:
            int: The HTTP status code of the accepted response

        Raises:
            SerializationError: If the payload cannot be encoded
            TransportError: If no response was received
            RemoteRejectionError: If the status code is not accepted
        """
        try:
            body = json.dumps(payload, allow_nan=False, separators=(',', ':'))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Unable to encode payload for {url}: {e}") from e

        @retry(
            retry_on_exception=retry_if_connection_error,
            stop_max_attempt_number=self.max_attempts,
            wait_fixed=int(self.retry_delay * 1000)  # milliseconds
        )
        def _send_request():
            logger.debug("POST %s (%d bytes)", url, len(body))
            return self.session.post(
                url,
                data=body,
                headers=self.headers,
                timeout=self.request_timeout
            )

        try:
            response = _send_request()
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        logger.debug("Response from %s: HTTP %s", url, response.status_code)
        if response.status_code not in tuple(accepted_statuses):
            raise RemoteRejectionError(url, response.status_code, response.text)
        return response.status_code

    def close(self) -> None:
        self.session.close()
