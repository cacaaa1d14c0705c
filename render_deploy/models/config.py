"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import (
    DEFAULT_SOURCE_DIR,
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_TYPE,
    DEFAULT_SERVICE_ENV,
    DEFAULT_BUILD_COMMAND,
    DEFAULT_START_COMMAND,
    DEFAULT_API_HOST,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_WEB_URL,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_PUSH_BRANCHES,
    DEFAULT_REMOTE_NAME,
)

DEFAULT_PREREQUISITES = ["curl", "jq", "git"]


def _check_mapping(name: str, data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' section must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class ServiceConfig:
    """Render service settings"""

    name: str = DEFAULT_SERVICE_NAME
    type: str = DEFAULT_SERVICE_TYPE
    env: str = DEFAULT_SERVICE_ENV
    build_command: str = DEFAULT_BUILD_COMMAND
    start_command: str = DEFAULT_START_COMMAND
    api_host: str = DEFAULT_API_HOST

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "type": self.type,
            "env": self.env,
            "build_command": self.build_command,
            "start_command": self.start_command,
            "api_host": self.api_host,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ServiceConfig':
        """Create from dictionary"""
        data = _check_mapping("service", data)
        return cls(
            name=data.get("name", DEFAULT_SERVICE_NAME),
            type=data.get("type", DEFAULT_SERVICE_TYPE),
            env=data.get("env", DEFAULT_SERVICE_ENV),
            build_command=data.get("build_command", DEFAULT_BUILD_COMMAND),
            start_command=data.get("start_command", DEFAULT_START_COMMAND),
            api_host=data.get("api_host", DEFAULT_API_HOST),
        )


@dataclass
class GitHubConfig:
    """GitHub API settings"""

    api_url: str = DEFAULT_GITHUB_API_URL
    web_url: str = DEFAULT_GITHUB_WEB_URL
    private: bool = True
    timeout: float = DEFAULT_HTTP_TIMEOUT

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("GitHub timeout must be positive")
        self.api_url = self.api_url.rstrip("/")
        self.web_url = self.web_url.rstrip("/")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "api_url": self.api_url,
            "web_url": self.web_url,
            "private": self.private,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GitHubConfig':
        """Create from dictionary"""
        data = _check_mapping("github", data)
        return cls(
            api_url=data.get("api_url", DEFAULT_GITHUB_API_URL),
            web_url=data.get("web_url", DEFAULT_GITHUB_WEB_URL),
            private=bool(data.get("private", True)),
            timeout=data.get("timeout", DEFAULT_HTTP_TIMEOUT),
        )


@dataclass
class GitConfig:
    """Local git settings"""

    commit_message: str = DEFAULT_COMMIT_MESSAGE
    branches: List[str] = field(default_factory=lambda: list(DEFAULT_PUSH_BRANCHES))
    remote_name: str = DEFAULT_REMOTE_NAME
    author_name: Optional[str] = None
    author_email: Optional[str] = None

    def __post_init__(self):
        if not self.branches:
            raise ValueError("At least one push branch is required")

    def identity_options(self) -> List[str]:
        """Get `git -c` options for the configured commit identity"""
        options = []
        if self.author_name:
            options.extend(["-c", f"user.name={self.author_name}"])
        if self.author_email:
            options.extend(["-c", f"user.email={self.author_email}"])
        return options

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "commit_message": self.commit_message,
            "branches": list(self.branches),
            "remote_name": self.remote_name,
        }
        if self.author_name:
            data["author_name"] = self.author_name
        if self.author_email:
            data["author_email"] = self.author_email
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GitConfig':
        """Create from dictionary"""
        data = _check_mapping("git", data)
        branches = data.get("branches", DEFAULT_PUSH_BRANCHES)
        if not isinstance(branches, list):
            raise ValueError("'git.branches' must be a list")
        return cls(
            commit_message=data.get("commit_message", DEFAULT_COMMIT_MESSAGE),
            branches=[str(b) for b in branches],
            remote_name=data.get("remote_name", DEFAULT_REMOTE_NAME),
            author_name=data.get("author_name"),
            author_email=data.get("author_email"),
        )


@dataclass
class DeployConfig:
    """Complete render-deploy configuration"""

    source_dir: str = DEFAULT_SOURCE_DIR
    service: ServiceConfig = field(default_factory=ServiceConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    git: GitConfig = field(default_factory=GitConfig)
    prerequisites: List[str] = field(default_factory=lambda: list(DEFAULT_PREREQUISITES))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source_dir": self.source_dir,
            "service": self.service.to_dict(),
            "github": self.github.to_dict(),
            "git": self.git.to_dict(),
            "prerequisites": list(self.prerequisites),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'DeployConfig':
        """Create from dictionary"""
        data = _check_mapping("root", data)

        prerequisites = data.get("prerequisites", DEFAULT_PREREQUISITES)
        if not isinstance(prerequisites, list):
            raise ValueError("'prerequisites' must be a list of tool names")

        return cls(
            source_dir=str(data.get("source_dir", DEFAULT_SOURCE_DIR)),
            service=ServiceConfig.from_dict(data.get("service")),
            github=GitHubConfig.from_dict(data.get("github")),
            git=GitConfig.from_dict(data.get("git")),
            prerequisites=[str(p) for p in prerequisites],
        )
