"""Credential models collected at deploy time"""

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class ApiKeys:
    """Third-party API keys forwarded to the deployed service

    Either key may be empty. An empty key switches the deployed
    service to mock data.
    """

    weatherbit: str = ""
    openai: str = ""

    @property
    def use_mock_data(self) -> bool:
        """True unless both keys are present"""
        return not (self.weatherbit and self.openai)


@dataclass(frozen=True)
class GitHubCredentials:
    """GitHub account, target repository and access token"""

    username: str
    repository: str
    token: str

    def __repr__(self) -> str:
        return (f"GitHubCredentials(username={self.username!r}, "
                f"repository={self.repository!r}, token='***')")

    @property
    def full_name(self) -> str:
        return f"{self.username}/{self.repository}"

    def basic_auth_header(self) -> str:
        """Build an HTTP Basic authorization header value for git"""
        raw = f"{self.username}:{self.token}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")
