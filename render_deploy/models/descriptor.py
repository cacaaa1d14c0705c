"""Render service descriptor models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


@dataclass
class EnvVar:
    """A single `envVars` entry

    Entries either carry a literal value or are marked as managed by
    Render (``sync: false``), never both.
    """

    key: str
    value: Optional[str] = None
    sync: Optional[bool] = None

    def __post_init__(self):
        if self.sync is not None and self.value is not None:
            raise ValueError(f"Env var {self.key} cannot have both value and sync")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key}
        if self.sync is not None:
            data["sync"] = self.sync
        else:
            data["value"] = "" if self.value is None else self.value
        return data


@dataclass
class ServiceDescriptor:
    """One service block of a render.yaml file"""

    type: str
    name: str
    env: str
    build_command: str
    start_command: str
    env_vars: List[EnvVar] = field(default_factory=list)

    def get_env_var(self, key: str) -> Optional[EnvVar]:
        for env_var in self.env_vars:
            if env_var.key == key:
                return env_var
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the render.yaml document structure"""
        return {
            "services": [
                {
                    "type": self.type,
                    "name": self.name,
                    "env": self.env,
                    "buildCommand": self.build_command,
                    "startCommand": self.start_command,
                    "envVars": [env_var.to_dict() for env_var in self.env_vars],
                }
            ]
        }
