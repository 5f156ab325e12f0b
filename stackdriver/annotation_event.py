"""
Annotation events shown on the Stackdriver timeline.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import config
from .utils import unix_now

INFO = 'INFO'
WARN = 'WARN'
ERROR = 'ERROR'
LEVELS = (INFO, WARN, ERROR)

ELLIPSIS = '...'


def truncate_message(message: str, limit: int = config.MAX_MESSAGE_LENGTH) -> str:
    """Cut messages over the limit down to limit - 4 characters plus an ellipsis."""
    if len(message) > limit:
        return message[:limit - len(ELLIPSIS) - 1] + ELLIPSIS
    return message


@dataclass
class AnnotationEvent:
    """A timeline annotation posted to the event gateway."""
    # Plain text, at most 256 characters.
    message: str
    # Person or robot the annotation is attributed to.
    annotated_by: Optional[str] = None
    # INFO, WARN or ERROR. The gateway defaults to INFO.
    level: Optional[str] = None
    # Events with an instance id show up under that instance.
    instance_id: Optional[str] = None
    # Unix time the event appears at on the timeline. Defaults to now.
    event_epoch: Optional[int] = None

    def __post_init__(self):
        self.message = truncate_message(self.message)
        if self.event_epoch is None:
            self.event_epoch = unix_now()

    def to_dict(self) -> Dict[str, Any]:
        data = {'message': self.message}
        for key in ('annotated_by', 'level', 'instance_id'):
            value = getattr(self, key)
            if value:
                data[key] = value
        data['event_epoch'] = self.event_epoch
        return data
