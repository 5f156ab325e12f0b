"""
Collectors that turn local measurements into custom metric points.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional, Union

import psutil

from .custom_metric import GatewayMessage

logger = logging.getLogger(__name__)


class Collector(ABC):
    """
    Abstract base class for all metric collectors.

    Subclasses implement collect(), returning a mapping of metric name to
    value. collect_into() adds those values to a gateway message.
    """

    def __init__(self, instance_id: Optional[str] = None):
        self.instance_id = instance_id

    @abstractmethod
    def collect(self) -> Dict[str, Any]:
        """
        Collect metrics.

        Returns:
            dict: Metric name to measured value
        """
        pass

    @property
    def name(self) -> str:
        """
        Get the name of the collector.

        Returns:
            str: The name of the collector (class name by default)
        """
        return self.__class__.__name__

    def collect_into(
        self,
        gateway_message: GatewayMessage,
        collected_at: Union[int, float, datetime, None] = None
    ) -> Dict[str, Any]:
        """
        Collect metrics and add them to a gateway message.

        Args:
            gateway_message (GatewayMessage): Message receiving the points
            collected_at (int or datetime, optional): Collection time. Defaults to the message timestamp.

        Returns:
            dict: The collected metrics
        """
        metrics = self.collect()
        if collected_at is None:
            collected_at = gateway_message.timestamp

        for metric_name, value in metrics.items():
            gateway_message.custom_metric(metric_name, value, collected_at, instance_id=self.instance_id)

        logger.debug("%s collected %d metrics", self.name, len(metrics))
        return metrics


class SystemCollector(Collector):
    """Collector for host CPU, memory and disk usage percentages."""

    def __init__(
        self,
        instance_id: Optional[str] = None,
        prefix: str = 'system',
        disk_path: str = '/',
        cpu_interval: float = 1.0
    ):
        super().__init__(instance_id)
        self.prefix = prefix
        self.disk_path = disk_path
        self.cpu_interval = cpu_interval

    def collect(self) -> Dict[str, Any]:
        return {
            f'{self.prefix}.cpu_usage': psutil.cpu_percent(interval=self.cpu_interval),
            f'{self.prefix}.memory_usage': psutil.virtual_memory().percent,
            f'{self.prefix}.disk_usage': psutil.disk_usage(self.disk_path).percent,
        }
