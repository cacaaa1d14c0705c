# render_deploy/models/__init__.py
"""Data models for render-deploy"""

from .config import DeployConfig, ServiceConfig, GitHubConfig, GitConfig
from .credentials import ApiKeys, GitHubCredentials
from .descriptor import EnvVar, ServiceDescriptor
from .result import (
    OperationStatus,
    RepoCreationOutcome,
    ErrorDetail,
    Result,
    RepositoryCreation,
    StageRecord,
    DeployResult,
)

__all__ = [
    # Config models
    "DeployConfig",
    "ServiceConfig",
    "GitHubConfig",
    "GitConfig",

    # Credential models
    "ApiKeys",
    "GitHubCredentials",

    # Descriptor models
    "EnvVar",
    "ServiceDescriptor",

    # Result models
    "OperationStatus",
    "RepoCreationOutcome",
    "ErrorDetail",
    "Result",
    "RepositoryCreation",
    "StageRecord",
    "DeployResult",
]
