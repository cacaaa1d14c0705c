"""Render Deploy - Ship the trip planner service to Render.com.

This tool stages the application, generates its render.yaml, pushes it to
a new GitHub repository and prints the remaining dashboard steps.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.deployer import Deployer, deploy

# Data models
from .models import ApiKeys, GitHubCredentials, DeployConfig, DeployResult, ServiceDescriptor

# Exceptions
from .api.exceptions import (
    RenderDeployError,
    ConfigError,
    PrerequisiteError,
    StagingError,
    GitError,
    PushError,
    RepositoryError,
    AuthenticationError,
    UserCancelledError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Deployer",
    "deploy",

    # Data models
    "ApiKeys",
    "GitHubCredentials",
    "DeployConfig",
    "DeployResult",
    "ServiceDescriptor",

    # Exceptions
    "RenderDeployError",
    "ConfigError",
    "PrerequisiteError",
    "StagingError",
    "GitError",
    "PushError",
    "RepositoryError",
    "AuthenticationError",
    "UserCancelledError",
]
