"""Deployment pipeline: stage, commit, publish to GitHub, hand off to Render"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from ..api.exceptions import AuthenticationError, RenderDeployError
from ..constants import (
    EMOJI_SUCCESS,
    RENDER_DASHBOARD_URL,
    FRONTEND_URL_VARIABLE,
    DEFAULT_FRONTEND_URL,
    FRONTEND_ROUTE,
)
from ..core.descriptor import build_descriptor, write_descriptor
from ..core.github_client import GitHubClient
from ..core.prerequisites import PrerequisiteChecker, resolve_tools
from ..core.staging import StagingArea
from ..core.wizard import DeployWizard
from ..models.config import DeployConfig
from ..models.credentials import ApiKeys, GitHubCredentials
from ..models.result import DeployResult, OperationStatus, RepoCreationOutcome
from ..utils.git_utils import GitRepository, get_remote_url

logger = logging.getLogger(__name__)


class DeployService:
    """Runs the deployment pipeline end to end

    Stages run strictly in order and the first failure ends the run.
    The staging directory is removed on every exit path unless
    ``keep_staging`` is set.
    """

    def __init__(self,
                 config: Optional[DeployConfig] = None,
                 wizard: Optional[DeployWizard] = None,
                 console: Optional[Console] = None,
                 checker: Optional[PrerequisiteChecker] = None,
                 github_client: Optional[GitHubClient] = None,
                 git_runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
                 working_dir: Optional[Path] = None,
                 source_dir: Optional[Path] = None,
                 keep_staging: bool = False,
                 staging_base_dir: Optional[Path] = None):
        self.config = config or DeployConfig()
        self.console = console or Console()
        self.wizard = wizard or DeployWizard(console=self.console)
        self.checker = checker or PrerequisiteChecker(
            resolve_tools(self.config.prerequisites),
            console=self.console
        )
        self.github_client = github_client or GitHubClient(self.config.github)
        self.git_runner = git_runner
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.source_dir = self._resolve_source(source_dir)
        self.keep_staging = keep_staging
        self.staging_base_dir = staging_base_dir

    def _resolve_source(self, source_dir: Optional[Path]) -> Path:
        path = Path(source_dir) if source_dir else Path(self.config.source_dir)
        if not path.is_absolute():
            path = self.working_dir / path
        return path

    def run(self) -> DeployResult:
        """Execute all stages

        Returns:
            DeployResult for a completed run

        Raises:
            RenderDeployError: On the first failing stage
        """
        result = DeployResult(status=OperationStatus.IN_PROGRESS)
        result.metadata["working_dir"] = str(self.working_dir)
        result.metadata["source_dir"] = str(self.source_dir)

        service_name = self.config.service.name
        self.console.print(f"[green]=== Render Deployment: {service_name} ===[/green]")

        staging = StagingArea(keep=self.keep_staging, base_dir=self.staging_base_dir)

        try:
            self.check_prerequisites(result)
            api_keys = self.collect_api_keys(result)

            staging.create()
            result.staging_dir = staging.path
            self.console.print(
                f"\n[yellow]Creating temporary directory for deployment: {staging.path}[/yellow]"
            )

            self.stage_source(staging, result)
            self.bootstrap_data(staging, result)
            self.generate_descriptor(staging, api_keys, result)
            repo = self.init_repository(staging, result)

            credentials = self.wizard.collect_github()
            self.create_remote_repository(credentials, result)
            self.publish(repo, credentials, result)
            self.show_next_steps(credentials)

        except RenderDeployError as e:
            result.add_error(e.error_code or "", str(e))
            result.complete(OperationStatus.FAILED)
            logger.debug("Deployment failed: %s", e)
            raise

        finally:
            self.cleanup(staging, result)

        result.message = "Deployment handed off to Render"
        result.complete(OperationStatus.SUCCESS)
        self.show_final_steps()
        return result

    def check_prerequisites(self, result: DeployResult) -> None:
        self.console.print("\n[yellow]Checking prerequisites...[/yellow]")
        statuses = self.checker.ensure_all()
        for status in statuses:
            if status.installed:
                result.add_warning(f"Installed missing tool: {status.name}")
        result.metadata["tools"] = {s.name: s.version for s in statuses}
        result.record_stage("prerequisites")
        self.console.print("[green]All prerequisites are installed.[/green]")

    def collect_api_keys(self, result: DeployResult) -> ApiKeys:
        api_keys = self.wizard.collect_api_keys()
        result.use_mock_data = api_keys.use_mock_data
        result.record_stage("inputs", detail="mock data" if api_keys.use_mock_data else "live data")
        return api_keys

    def stage_source(self, staging: StagingArea, result: DeployResult) -> None:
        self.console.print(f"\n[yellow]Copying application code from {self.source_dir}...[/yellow]")
        staging.populate(self.source_dir)
        result.record_stage("staging", detail=str(staging.path))

    def bootstrap_data(self, staging: StagingArea, result: DeployResult) -> None:
        self.console.print("\n[yellow]Creating initial data files...[/yellow]")
        written = staging.bootstrap_data()
        result.record_stage("data", detail=f"{len(written)} files")

    def generate_descriptor(self, staging: StagingArea, api_keys: ApiKeys,
                            result: DeployResult) -> None:
        self.console.print("\n[yellow]Creating Render configuration file...[/yellow]")
        descriptor = build_descriptor(api_keys, self.config.service)
        result.descriptor_path = write_descriptor(descriptor, staging.path)
        result.record_stage("descriptor", detail=str(result.descriptor_path))

    def init_repository(self, staging: StagingArea, result: DeployResult) -> GitRepository:
        self.console.print("\n[yellow]Initializing git repository...[/yellow]")
        repo = GitRepository(
            staging.path,
            config_options=self.config.git.identity_options(),
            runner=self.git_runner
        )
        repo.init()
        repo.add_all()
        repo.commit(self.config.git.commit_message)
        result.record_stage("commit")
        return repo

    def create_remote_repository(self, credentials: GitHubCredentials,
                                 result: DeployResult) -> None:
        """Create the GitHub repository, tolerating one that already exists

        Raises:
            AuthenticationError: If the token is rejected
        """
        creation = self.github_client.create_repository(credentials)
        result.repository = creation

        if creation.outcome == RepoCreationOutcome.BAD_CREDENTIALS:
            raise AuthenticationError()

        if creation.outcome == RepoCreationOutcome.ALREADY_EXISTS:
            self.console.print("[yellow]Repository already exists. Continuing with existing repository.[/yellow]")
            result.add_warning(f"Repository {credentials.full_name} already exists")
        else:
            self.console.print("[green]GitHub repository created successfully.[/green]")

        result.record_stage("repository", detail=creation.outcome.value)

    def publish(self, repo: GitRepository, credentials: GitHubCredentials,
                result: DeployResult) -> None:
        self.console.print("\n[yellow]Adding GitHub remote...[/yellow]")
        remote = self.config.git.remote_name
        repo.add_remote(remote, self.github_client.remote_url(credentials))
        result.remote_url = get_remote_url(repo.path, remote, runner=self.git_runner)

        result.pushed_branch = repo.push_with_fallback(
            remote,
            self.config.git.branches,
            auth_header=credentials.basic_auth_header(),
            auth_url=self.config.github.web_url
        )
        result.record_stage("push", detail=result.pushed_branch)
        self.console.print("[green]Code pushed to GitHub repository.[/green]")

    def cleanup(self, staging: StagingArea, result: DeployResult) -> None:
        if not staging.exists:
            return

        if staging.keep:
            self.console.print(f"\n[yellow]Keeping staging directory: {staging.path}[/yellow]")
            return

        self.console.print("\n[yellow]Cleaning up temporary files...[/yellow]")
        result.staging_removed = staging.cleanup()
        if result.staging_removed:
            self.console.print("[green]Cleanup complete.[/green]")

    def show_next_steps(self, credentials: GitHubCredentials) -> None:
        self.console.print("\n[green]=== Next Steps for Render Deployment ===[/green]")
        self.console.print(f"1. Go to {RENDER_DASHBOARD_URL}")
        self.console.print("2. Connect your GitHub account if you haven't already")
        self.console.print(f"3. Select the '{credentials.repository}' repository")
        self.console.print("4. Render will automatically detect the render.yaml configuration")
        self.console.print("5. Click 'Apply' to deploy the service")
        self.console.print("6. Once deployed, copy the URL provided by Render")

    def show_final_steps(self) -> None:
        self.console.print("\n[green]=== Final Steps ===[/green]")
        self.console.print("1. Add the following environment variable to your Next.js application:")
        self.console.print(f"   [yellow]{FRONTEND_URL_VARIABLE}={DEFAULT_FRONTEND_URL}[/yellow]",
                           highlight=False)
        self.console.print("   (Replace with your actual Render URL once deployed)")
        self.console.print("2. Restart your Next.js application")
        self.console.print(f"3. Access the Trip Planner at {FRONTEND_ROUTE} in your application")
        self.console.print(f"\n[green]{EMOJI_SUCCESS} Setup complete! "
                           f"Follow the steps above to finish deployment.[/green]")
