"""
Client for the Stackdriver custom metric and event gateways.
"""
import logging
from datetime import datetime
from typing import Optional, Union

import requests

from . import config
from .annotation_event import AnnotationEvent
from .custom_metric import GatewayMessage, create_gateway_message
from .deploy_event import DeployEvent
from .transport import Endpoints, Transport

logger = logging.getLogger(__name__)

# Status codes counted as success per gateway
METRIC_ACCEPTED_STATUSES = (200, 201)
EVENT_ACCEPTED_STATUSES = (200,)


class StackdriverClient:
    """Client holding the API key used to authenticate every request."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        customer_id: Optional[str] = None,
        endpoints: Optional[Endpoints] = None,
        request_timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
        session: Optional[requests.Session] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize the client.

        Args:
            api_key (str, optional): Stackdriver API key. Defaults to config.API_KEY.
            customer_id (str, optional): Customer id copied onto sent gateway messages. Defaults to config.CUSTOMER_ID.
            endpoints (Endpoints, optional): Gateway URLs. Defaults to the config URLs.
            request_timeout (float, optional): Request timeout in seconds. Defaults to config.REQUEST_TIMEOUT.
            max_attempts (int, optional): Attempts per request on connection errors. Defaults to config.MAX_ATTEMPTS.
            retry_delay (float, optional): Delay between attempts in seconds. Defaults to config.RETRY_DELAY.
            session (requests.Session, optional): Session to issue requests with.
            transport (Transport, optional): Prebuilt transport; overrides the HTTP options above.
        """
        self.api_key = api_key if api_key is not None else config.API_KEY
        self.customer_id = customer_id if customer_id is not None else config.CUSTOMER_ID
        self.transport = transport or Transport(
            self.api_key,
            endpoints=endpoints,
            request_timeout=request_timeout,
            max_attempts=max_attempts,
            retry_delay=retry_delay,
            session=session
        )

    @property
    def endpoints(self) -> Endpoints:
        return self.transport.endpoints

    def new_gateway_message(self) -> GatewayMessage:
        """Create an empty gateway message stamped with the current time."""
        return create_gateway_message()

    def send(self, gateway_message: GatewayMessage) -> None:
        """
        Send all points collected in a gateway message.

        Args:
            gateway_message (GatewayMessage): The batch to send

        Raises:
            StackdriverError: If the batch could not be delivered
        """
        if self.customer_id:
            gateway_message.customer_id = self.customer_id

        self.transport.post_json(
            self.endpoints.custom_metric,
            gateway_message.to_dict(),
            accepted_statuses=METRIC_ACCEPTED_STATUSES
        )
        logger.info("Sent %d custom metrics", len(gateway_message))

    def annotation_event(
        self,
        message: str,
        annotated_by: Optional[str] = None,
        level: Optional[str] = None,
        instance_id: Optional[str] = None,
        event_epoch: Optional[int] = None
    ) -> None:
        """
        Post an annotation event. Messages over 256 characters are truncated.

        Args:
            message (str): Plain text message
            annotated_by (str, optional): Who the annotation is attributed to
            level (str, optional): INFO, WARN or ERROR
            instance_id (str, optional): Instance the event belongs to
            event_epoch (int, optional): Unix time of the event. Defaults to now.

        Raises:
            StackdriverError: If the event could not be delivered
        """
        event = AnnotationEvent(
            message=message,
            annotated_by=annotated_by,
            level=level,
            instance_id=instance_id,
            event_epoch=event_epoch
        )
        self.transport.post_json(
            self.endpoints.annotation_event,
            event.to_dict(),
            accepted_statuses=EVENT_ACCEPTED_STATUSES
        )
        logger.info("Sent annotation event at %s", event.event_epoch)

    def deploy_event(
        self,
        revision_id: str,
        deployed_by: Optional[str] = None,
        deployed_to: Optional[str] = None,
        repository: Optional[str] = None
    ) -> None:
        """
        Post a deploy event.

        Args:
            revision_id (str): Revision of the code that was deployed
            deployed_by (str, optional): Who deployed it
            deployed_to (str, optional): Environment deployed to
            repository (str, optional): Repository or project deployed

        Raises:
            StackdriverError: If the event could not be delivered
        """
        event = DeployEvent(
            revision_id=revision_id,
            deployed_by=deployed_by,
            deployed_to=deployed_to,
            repository=repository
        )
        self.transport.post_json(
            self.endpoints.deploy_event,
            event.to_dict(),
            accepted_statuses=EVENT_ACCEPTED_STATUSES
        )
        logger.info("Sent deploy event for revision %s", revision_id)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> 'StackdriverClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


# Singleton instance for easy import - initialized as None and set up on first use
default_client = None


def configure(**kwargs) -> StackdriverClient:
    """
    Replace the default client.

    Args:
        **kwargs: Arguments passed to StackdriverClient

    Returns:
        StackdriverClient: The new default client
    """
    global default_client
    if default_client is not None:
        default_client.close()
    default_client = StackdriverClient(**kwargs)
    return default_client


def ensure_default_client() -> StackdriverClient:
    global default_client
    if default_client is None:
        default_client = StackdriverClient()
    return default_client


def send_metric(
    name: str,
    value,
    collected_at: Union[int, float, datetime, None] = None,
    instance_id: Optional[str] = None
) -> None:
    """
    Send a single custom metric using the default client.

    Args:
        name (str): Name of the custom metric
        value (int, float, str or bool): Measurement to record
        collected_at (int or datetime, optional): When it was collected. Defaults to now.
        instance_id (str, optional): Instance the metric belongs to
    """
    client = ensure_default_client()
    gateway_message = client.new_gateway_message()
    gateway_message.custom_metric(
        name,
        value,
        collected_at if collected_at is not None else gateway_message.timestamp,
        instance_id=instance_id
    )
    client.send(gateway_message)


def send(gateway_message: GatewayMessage) -> None:
    """Send a gateway message using the default client."""
    ensure_default_client().send(gateway_message)


def send_annotation_event(message: str, **kwargs) -> None:
    """Post an annotation event using the default client."""
    ensure_default_client().annotation_event(message, **kwargs)


def send_deploy_event(revision_id: str, **kwargs) -> None:
    """Post a deploy event using the default client."""
    ensure_default_client().deploy_event(revision_id, **kwargs)
