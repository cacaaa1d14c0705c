"""Minimal GitHub REST client for repository creation"""

import logging
from typing import Any, Dict, Optional

import requests

from ..api.exceptions import RepositoryError
from ..constants import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_BAD_CREDENTIALS,
    GITHUB_NAME_EXISTS,
)
from ..models.config import GitHubConfig
from ..models.credentials import GitHubCredentials
from ..models.result import RepoCreationOutcome, RepositoryCreation

logger = logging.getLogger(__name__)


def classify_response(status_code: int, body: Any) -> RepositoryCreation:
    """Classify a parsed `POST /user/repos` response

    Args:
        status_code: HTTP status code
        body: Parsed JSON body (anything that is not a dict counts as empty)

    Returns:
        RepositoryCreation with the outcome
    """
    if not isinstance(body, dict):
        body = {}

    message = str(body.get("message") or "")
    error_messages = [
        str(error.get("message") or "")
        for error in body.get("errors") or []
        if isinstance(error, dict)
    ]

    if status_code == 401 or GITHUB_BAD_CREDENTIALS in message:
        outcome = RepoCreationOutcome.BAD_CREDENTIALS
    elif any(GITHUB_NAME_EXISTS in m for m in [message] + error_messages):
        outcome = RepoCreationOutcome.ALREADY_EXISTS
    else:
        outcome = RepoCreationOutcome.CREATED

    return RepositoryCreation(
        outcome=outcome,
        status_code=status_code,
        message="; ".join(m for m in [message] + error_messages if m),
        html_url=body.get("html_url"),
    )


class GitHubClient:
    """Creates repositories through the GitHub REST API"""

    def __init__(self,
                 config: Optional[GitHubConfig] = None,
                 session: Optional[requests.Session] = None):
        self.config = config or GitHubConfig()
        self.session = session or requests.Session()

    def _headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": f"token {token}",
            "Accept": GITHUB_ACCEPT_HEADER,
        }

    def create_repository(self, credentials: GitHubCredentials) -> RepositoryCreation:
        """Request a new repository for the authenticated user

        Raises:
            RepositoryError: If the request could not be completed
        """
        url = f"{self.config.api_url}/user/repos"
        payload = {"name": credentials.repository, "private": self.config.private}

        logger.debug("POST %s name=%s private=%s", url, credentials.repository, self.config.private)
        try:
            response = self.session.post(
                url,
                headers=self._headers(credentials.token),
                json=payload,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            raise RepositoryError(f"GitHub API request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {"message": (response.text or "")[:200]}

        creation = classify_response(response.status_code, body)
        logger.info("GitHub responded %s (%s)", response.status_code, creation.outcome.value)

        if creation.outcome == RepoCreationOutcome.CREATED and response.status_code >= 400:
            logger.warning("Unexpected GitHub response %s: %s", response.status_code, creation.message)

        return creation

    def remote_url(self, credentials: GitHubCredentials) -> str:
        """Token-free HTTPS remote URL for a repository"""
        return f"{self.config.web_url}/{credentials.full_name}.git"
