"""
Deploy events recording a code revision going out.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DeployEvent:
    """A code deploy posted to the event gateway."""
    # Revision of the code that was deployed.
    revision_id: str
    # Person or robot responsible for the deploy.
    deployed_by: Optional[str] = None
    # Environment deployed to (development, staging, production).
    deployed_to: Optional[str] = None
    # Repository or project deployed.
    repository: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'revision_id': self.revision_id}
        for key in ('deployed_by', 'deployed_to', 'repository'):
            value = getattr(self, key)
            if value:
                data[key] = value
        return data
