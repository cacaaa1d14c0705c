"""Deployer API for Render deployments"""

from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from ..core.descriptor import build_descriptor, render_descriptor
from ..core.prerequisites import PrerequisiteChecker, ToolStatus, resolve_tools
from ..core.wizard import DeployWizard
from ..models.config import DeployConfig
from ..models.credentials import ApiKeys
from ..models.result import DeployResult
from ..services.config_service import ConfigService
from ..services.deploy_service import DeployService

PathLike = Union[str, Path]


class Deployer:
    """Deployer class for Render deployments"""

    def __init__(self,
                 config: Optional[DeployConfig] = None,
                 config_path: Optional[PathLike] = None,
                 working_dir: Optional[PathLike] = None,
                 console: Optional[Console] = None):
        """
        Initialize deployer

        Args:
            config: Ready-made configuration (skips file lookup)
            config_path: Configuration file to load
            working_dir: Directory the source path is resolved against
            console: Console used for progress output
        """
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()
        self.console = console or Console()

        if config is None:
            config = ConfigService(
                config_path=Path(config_path) if config_path else None,
                working_dir=self.working_dir
            ).load_config()
        self.config = config

    def run(self,
            source_dir: Optional[PathLike] = None,
            keep_staging: bool = False,
            wizard: Optional[DeployWizard] = None) -> DeployResult:
        """
        Run the full deployment pipeline

        Args:
            source_dir: Application source tree (defaults to config.source_dir)
            keep_staging: Leave the staging directory in place
            wizard: Prompt collector (defaults to interactive prompts)

        Returns:
            DeployResult: Deployment result

        Raises:
            RenderDeployError: If any stage fails
        """
        service = DeployService(
            config=self.config,
            wizard=wizard or DeployWizard(console=self.console),
            console=self.console,
            working_dir=self.working_dir,
            source_dir=Path(source_dir) if source_dir else None,
            keep_staging=keep_staging
        )
        return service.run()

    def check(self, install: bool = False) -> List[ToolStatus]:
        """
        Check prerequisite tools

        Args:
            install: Attempt installation of missing tools

        Returns:
            List of ToolStatus

        Raises:
            PrerequisiteError: Only when install is requested and fails
        """
        checker = PrerequisiteChecker(resolve_tools(self.config.prerequisites), console=self.console)
        if install:
            return checker.ensure_all()
        return checker.check_all()

    def preview_descriptor(self, weatherbit_key: str = "", openai_key: str = "") -> str:
        """Render the render.yaml the pipeline would write"""
        api_keys = ApiKeys(weatherbit=weatherbit_key, openai=openai_key)
        return render_descriptor(build_descriptor(api_keys, self.config.service))


def deploy(source_dir: Optional[PathLike] = None,
           config_path: Optional[PathLike] = None,
           keep_staging: bool = False) -> DeployResult:
    """
    Deploy the application to Render

    This is a convenience function that creates a Deployer instance
    and runs the interactive pipeline.

    Returns:
        DeployResult: Deployment result

    Raises:
        RenderDeployError: If deployment fails
    """
    deployer = Deployer(config_path=config_path)
    return deployer.run(source_dir=source_dir, keep_staging=keep_staging)
