"""Interactive collection of deployment credentials"""

import logging
import os
from typing import Mapping, Optional

from rich.console import Console
from rich.prompt import Prompt

from ..api.exceptions import ConfigError, UserCancelledError
from ..constants import (
    ENV_WEATHERBIT_API_KEY,
    ENV_OPENAI_API_KEY,
    ENV_GITHUB_USERNAME,
    ENV_GITHUB_REPOSITORY,
    ENV_GITHUB_TOKEN,
    PROMPT_WEATHERBIT_KEY,
    PROMPT_OPENAI_KEY,
    PROMPT_GITHUB_USERNAME,
    PROMPT_GITHUB_REPOSITORY,
    PROMPT_GITHUB_TOKEN,
)
from ..models.credentials import ApiKeys, GitHubCredentials

logger = logging.getLogger(__name__)


class DeployWizard:
    """Prompts for API keys and GitHub credentials

    A variable present in ``environ`` answers its prompt without asking;
    an empty value counts as an answer.
    """

    def __init__(self,
                 console: Optional[Console] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.console = console or Console()
        self.environ = os.environ if environ is None else environ

    def _ask(self, env_key: str, prompt: str, password: bool = False) -> str:
        if env_key in self.environ:
            logger.info("Using %s from environment", env_key)
            return self.environ[env_key].strip()

        try:
            answer = Prompt.ask(prompt, default="", show_default=False,
                                password=password, console=self.console)
        except (EOFError, KeyboardInterrupt) as e:
            raise UserCancelledError() from e

        return (answer or "").strip()

    def _ask_repository(self) -> str:
        """Ask for a bare repository name (no owner prefix)

        Raises:
            ConfigError: If the environment supplies an ``owner/name`` value
        """
        if ENV_GITHUB_REPOSITORY in self.environ:
            repository = self._ask(ENV_GITHUB_REPOSITORY, PROMPT_GITHUB_REPOSITORY)
            if "/" in repository:
                raise ConfigError(
                    f"{ENV_GITHUB_REPOSITORY} must be a repository name without an owner, "
                    f"got '{repository}'"
                )
            return repository

        while True:
            repository = self._ask(ENV_GITHUB_REPOSITORY, PROMPT_GITHUB_REPOSITORY)
            if "/" not in repository:
                return repository
            self.console.print("[red]Enter the repository name only, without the owner.[/red]")

    def collect_api_keys(self) -> ApiKeys:
        """Ask for the WeatherBit and OpenAI keys; both may be empty"""
        self.console.print("\n[yellow]Setting up environment variables...[/yellow]")
        api_keys = ApiKeys(
            weatherbit=self._ask(ENV_WEATHERBIT_API_KEY, PROMPT_WEATHERBIT_KEY),
            openai=self._ask(ENV_OPENAI_API_KEY, PROMPT_OPENAI_KEY),
        )

        if api_keys.use_mock_data:
            self.console.print("[yellow]No API keys provided. Using mock data.[/yellow]")

        return api_keys

    def collect_github(self) -> GitHubCredentials:
        """Ask for the GitHub username, repository name and token"""
        self.console.print(
            "\n[yellow]To deploy to Render, we need to push this code to a GitHub repository.[/yellow]"
        )
        username = self._ask(ENV_GITHUB_USERNAME, PROMPT_GITHUB_USERNAME)
        repository = self._ask_repository()

        self.console.print("\n[yellow]Creating GitHub repository...[/yellow]")
        token = self._ask(ENV_GITHUB_TOKEN, PROMPT_GITHUB_TOKEN, password=True)

        return GitHubCredentials(username=username, repository=repository, token=token)
