"""Public API for render-deploy"""

from .deployer import Deployer, deploy
from .exceptions import (
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
    "Deployer",
    "deploy",
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
