"""
Custom metric points and the gateway message that carries them.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from . import config
from .exceptions import StaleMetricError
from .utils import to_unix_timestamp, unix_now

logger = logging.getLogger(__name__)


@dataclass
class Metric:
    """A single custom metric data point."""
    name: str
    value: Any
    # Unix time the value was collected. Over an hour old is rejected.
    collected_at: int
    # Metrics without an instance id show up under the Custom resource type.
    instance_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'collected_at': self.collected_at,
            'name': self.name,
            'value': self.value,
        }
        if self.instance_id:
            data['instance_id'] = self.instance_id
        return data


class GatewayMessage:
    """
    Batch of custom metric points sent in one request.

    Points keep insertion order and may share a name. Sending a message does
    not clear it; more points can be added and the message sent again.
    """

    def __init__(self, timestamp: Optional[int] = None, customer_id: Optional[str] = None):
        """
        Initialize the gateway message.

        Args:
            timestamp (int, optional): Unix time the message was created. Defaults to now.
            customer_id (str, optional): Stackdriver assigned customer id.
        """
        self.timestamp = timestamp if timestamp is not None else unix_now()
        self.protocol_version = config.API_PROTOCOL_VERSION
        self.customer_id = customer_id
        self.data: List[Metric] = []
        self._lock = threading.Lock()

    def custom_metric(
        self,
        name: str,
        value: Any,
        collected_at: Union[int, float, datetime],
        instance_id: Optional[str] = None
    ) -> Metric:
        """
        Add a data point to the message.

        Args:
            name (str): Name of the custom metric
            value (int, float, str or bool): Measurement to record
            collected_at (int or datetime): When the value was collected
            instance_id (str, optional): Instance the metric belongs to

        Returns:
            Metric: The added point

        Raises:
            StaleMetricError: If collected_at is more than an hour in the past
        """
        collected_at = to_unix_timestamp(collected_at)
        if unix_now() - collected_at > config.MAX_METRIC_AGE:
            raise StaleMetricError(collected_at, config.MAX_METRIC_AGE)

        metric = Metric(name=name, value=value, collected_at=collected_at, instance_id=instance_id)
        with self._lock:
            self.data.append(metric)
        logger.debug("Added metric %s=%r", name, value)
        return metric

    add_point = custom_metric

    def to_dict(self) -> Dict[str, Any]:
        """Request body with the 'gateway_msg' root value."""
        with self._lock:
            points = [metric.to_dict() for metric in self.data]
        message = {
            'timestamp': self.timestamp,
            'proto_version': self.protocol_version,
        }
        if self.customer_id:
            message['customer_id'] = self.customer_id
        message['data'] = points
        return {'gateway_msg': message}

    def __len__(self) -> int:
        with self._lock:
            return len(self.data)


def create_gateway_message() -> GatewayMessage:
    """Factory for an empty gateway message stamped with the current time."""
    return GatewayMessage()
