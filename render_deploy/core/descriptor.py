"""render.yaml generation"""

from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import StagingError
from ..constants import (
    DESCRIPTOR_FILE,
    ENV_WEATHERBIT_API_KEY,
    ENV_OPENAI_API_KEY,
    ENV_USE_MOCK_DATA,
    ENV_API_HOST,
    ENV_API_PORT,
)
from ..models.config import ServiceConfig
from ..models.credentials import ApiKeys
from ..models.descriptor import EnvVar, ServiceDescriptor


def build_descriptor(api_keys: ApiKeys,
                     service: Optional[ServiceConfig] = None) -> ServiceDescriptor:
    """Build the Render service descriptor for a set of API keys

    The descriptor always carries five env vars: both API keys, the
    derived mock-data flag, the bind host and a Render-managed port.
    """
    service = service or ServiceConfig()

    return ServiceDescriptor(
        type=service.type,
        name=service.name,
        env=service.env,
        build_command=service.build_command,
        start_command=service.start_command,
        env_vars=[
            EnvVar(ENV_WEATHERBIT_API_KEY, value=api_keys.weatherbit),
            EnvVar(ENV_OPENAI_API_KEY, value=api_keys.openai),
            EnvVar(ENV_USE_MOCK_DATA, value="true" if api_keys.use_mock_data else "false"),
            EnvVar(ENV_API_HOST, value=service.api_host),
            EnvVar(ENV_API_PORT, sync=False),
        ],
    )


def render_descriptor(descriptor: ServiceDescriptor) -> str:
    """Serialize a descriptor to render.yaml text"""
    return yaml.safe_dump(descriptor.to_dict(), default_flow_style=False, sort_keys=False)


def write_descriptor(descriptor: ServiceDescriptor, directory: Path) -> Path:
    """Write render.yaml into a directory

    Returns:
        Path of the written file

    Raises:
        StagingError: If the file cannot be written
    """
    path = Path(directory) / DESCRIPTOR_FILE
    try:
        path.write_text(render_descriptor(descriptor), encoding="utf-8")
    except OSError as e:
        raise StagingError(f"Failed to write {path}: {e}") from e
    return path
