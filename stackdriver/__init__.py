"""
Client library for submitting custom metrics, annotation events and deploy
events to Stackdriver.
"""
from .annotation_event import AnnotationEvent, truncate_message
from .client import (
    StackdriverClient,
    configure,
    send,
    send_metric,
    send_annotation_event,
    send_deploy_event,
)
from .collector import Collector, SystemCollector
from .custom_metric import GatewayMessage, Metric, create_gateway_message
from .deploy_event import DeployEvent
from .exceptions import (
    StackdriverError,
    SerializationError,
    TransportError,
    RemoteRejectionError,
    StaleMetricError,
)
from .transport import Endpoints, Transport

__version__ = '0.1.0'

__all__ = [
    'StackdriverClient',
    'GatewayMessage',
    'Metric',
    'AnnotationEvent',
    'DeployEvent',
    'Endpoints',
    'Transport',
    'Collector',
    'SystemCollector',
    'StackdriverError',
    'SerializationError',
    'TransportError',
    'RemoteRejectionError',
    'StaleMetricError',
    'configure',
    'create_gateway_message',
    'truncate_message',
    'send',
    'send_metric',
    'send_annotation_event',
    'send_deploy_event',
]
