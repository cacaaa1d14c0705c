"""Prerequisite tool detection and best-effort installation"""

import logging
import re
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from packaging.version import InvalidVersion, Version, parse
from rich.console import Console

from ..api.exceptions import ConfigError, PrerequisiteError
from ..constants import MIN_GIT_VERSION

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+(?:\.\d+)+)")


@dataclass
class ToolSpec:
    """Description of an external tool the deployment relies on"""

    name: str
    help_url: Optional[str] = None
    # platform key ("linux", "darwin") -> commands run in order
    install_commands: Dict[str, List[List[str]]] = field(default_factory=dict)
    version_args: List[str] = field(default_factory=lambda: ["--version"])
    min_version: Optional[str] = None


@dataclass
class ToolStatus:
    """Result of probing a single tool"""

    name: str
    found: bool
    path: Optional[str] = None
    version: Optional[str] = None
    installed: bool = False
    outdated: bool = False
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.found and not self.outdated


BUILTIN_TOOLS: Dict[str, ToolSpec] = {
    "curl": ToolSpec(
        name="curl",
        help_url="https://curl.se/download.html",
    ),
    "jq": ToolSpec(
        name="jq",
        help_url="https://stedolan.github.io/jq/download/",
        install_commands={
            "linux": [
                ["sudo", "apt-get", "update"],
                ["sudo", "apt-get", "install", "-y", "jq"],
            ],
            "darwin": [
                ["brew", "install", "jq"],
            ],
        },
    ),
    "git": ToolSpec(
        name="git",
        help_url="https://git-scm.com/",
        min_version=MIN_GIT_VERSION,
    ),
}


def current_platform() -> str:
    """Map sys.platform onto the keys used by install_commands"""
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    return sys.platform


def resolve_tools(names: List[str]) -> List[ToolSpec]:
    """Look up tool specs by name

    Raises:
        ConfigError: If a name is not in the built-in table
    """
    tools = []
    for name in names:
        spec = BUILTIN_TOOLS.get(name)
        if spec is None:
            known = ", ".join(sorted(BUILTIN_TOOLS))
            raise ConfigError(f"Unknown prerequisite '{name}' (known: {known})")
        tools.append(spec)
    return tools


def parse_tool_version(output: str) -> Optional[Version]:
    """Extract the first dotted version number from `--version` output"""
    match = _VERSION_RE.search(output or "")
    if not match:
        return None
    try:
        return parse(match.group(1))
    except InvalidVersion:
        return None


class PrerequisiteChecker:
    """Checks that external tools are invocable, installing where supported"""

    def __init__(self,
                 tools: List[ToolSpec],
                 platform: Optional[str] = None,
                 which: Callable[[str], Optional[str]] = shutil.which,
                 runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
                 console: Optional[Console] = None):
        self.tools = tools
        self.platform = platform or current_platform()
        self.which = which
        self.runner = runner
        self.console = console or Console()

    def check(self, tool: ToolSpec) -> ToolStatus:
        """Probe a tool without installing anything"""
        path = self.which(tool.name)
        if not path:
            return ToolStatus(name=tool.name, found=False,
                              message=f"{tool.name} is not installed")

        version = self._probe_version(tool)
        status = ToolStatus(
            name=tool.name,
            found=True,
            path=path,
            version=str(version) if version else None,
            message=f"Found at {path}",
        )

        if tool.min_version and version is not None and version < Version(tool.min_version):
            status.outdated = True
            status.message = f"{tool.name} {version} is older than required {tool.min_version}"

        return status

    def check_all(self) -> List[ToolStatus]:
        return [self.check(tool) for tool in self.tools]

    def install(self, tool: ToolSpec) -> None:
        """Run the install commands for the current platform

        Raises:
            PrerequisiteError: If the platform is unsupported or a command fails
        """
        commands = tool.install_commands.get(self.platform)
        if not commands:
            raise PrerequisiteError(
                tool.name,
                self._missing_message(tool, f"Could not install {tool.name} automatically. "
                                            f"Please install {tool.name} manually.")
            )

        for command in commands:
            logger.debug("Running install command: %s", " ".join(command))
            try:
                self.runner(command, check=True)
            except (subprocess.CalledProcessError, FileNotFoundError) as e:
                raise PrerequisiteError(
                    tool.name,
                    self._missing_message(tool, f"Failed to install {tool.name}: {e}")
                ) from e

    def ensure(self, tool: ToolSpec) -> ToolStatus:
        """Make sure a tool is available, installing it if supported

        Raises:
            PrerequisiteError: If the tool is missing, too old, or could not be installed
        """
        status = self.check(tool)

        if not status.found:
            if not tool.install_commands:
                raise PrerequisiteError(
                    tool.name,
                    self._missing_message(tool, f"{tool.name} is not installed. "
                                                f"Please install {tool.name} first.")
                )

            self.console.print(f"[yellow]{tool.name} is not installed. Installing {tool.name}...[/yellow]")
            self.install(tool)

            status = self.check(tool)
            if not status.found:
                raise PrerequisiteError(
                    tool.name,
                    self._missing_message(tool, f"{tool.name} is still not available after installation.")
                )
            status.installed = True

        if status.outdated:
            raise PrerequisiteError(tool.name, status.message)

        return status

    def ensure_all(self) -> List[ToolStatus]:
        """Ensure every configured tool, stopping at the first failure"""
        return [self.ensure(tool) for tool in self.tools]

    def _probe_version(self, tool: ToolSpec) -> Optional[Version]:
        try:
            result = self.runner(
                [tool.name] + tool.version_args,
                capture_output=True,
                text=True
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Could not probe %s version: %s", tool.name, e)
            return None

        return parse_tool_version(result.stdout or result.stderr)

    @staticmethod
    def _missing_message(tool: ToolSpec, message: str) -> str:
        if tool.help_url:
            return f"{message}\nVisit {tool.help_url} for instructions."
        return message
