"""Git operation utilities"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

from ..api.exceptions import GitError, PushError

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]

_REDACTED = "***"


def redact_command(command: List[str]) -> str:
    """Render a git command line with header values hidden"""
    parts = []
    for part in command:
        if "extraheader=" in part.lower():
            key = part.split("=", 1)[0]
            parts.append(f"{key}={_REDACTED}")
        else:
            parts.append(part)
    return " ".join(parts)


def get_remote_url(path: Path, remote: str = 'origin',
                   runner: Runner = subprocess.run) -> Optional[str]:
    """
    Get Git remote URL

    Args:
        path: Repository path
        remote: Remote name

    Returns:
        Remote URL or None
    """
    try:
        result = runner(
            ['git', 'remote', 'get-url', remote],
            cwd=path,
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


class GitRepository:
    """Runs git commands against one working tree

    Every command runs with an explicit ``cwd``; the process working
    directory is never changed.
    """

    def __init__(self, path: Path,
                 config_options: Optional[List[str]] = None,
                 runner: Runner = subprocess.run):
        self.path = Path(path)
        self.config_options = config_options or []
        self.runner = runner

    def run(self, *args: str, extra_options: Optional[List[str]] = None) -> subprocess.CompletedProcess:
        """Run a git subcommand

        Raises:
            GitError: If git is missing or exits non-zero
        """
        command = ['git'] + self.config_options + (extra_options or []) + list(args)
        logger.debug("Running: %s", redact_command(command))

        try:
            result = self.runner(
                command,
                cwd=self.path,
                capture_output=True,
                text=True
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found", command=command[:1] + list(args)) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise GitError(
                f"git {args[0]} failed with exit code {result.returncode}"
                + (f": {stderr}" if stderr else ""),
                command=['git'] + list(args),
                returncode=result.returncode,
                stderr=stderr
            )

        return result

    def init(self) -> None:
        self.run('init')

    def add_all(self) -> None:
        self.run('add', '.')

    def commit(self, message: str) -> None:
        self.run('commit', '-m', message)

    def add_remote(self, name: str, url: str) -> None:
        self.run('remote', 'add', name, url)

    def push(self, remote: str, branch: str,
             auth_header: Optional[str] = None,
             auth_url: Optional[str] = None) -> None:
        """Push a branch and set its upstream

        Args:
            remote: Remote name
            branch: Branch name
            auth_header: Authorization header value sent for this command only
            auth_url: URL prefix the header is scoped to
        """
        extra = []
        if auth_header:
            key = f"http.{auth_url.rstrip('/')}/.extraheader" if auth_url else "http.extraheader"
            extra = ['-c', f"{key}=Authorization: {auth_header}"]
        self.run('push', '-u', remote, branch, extra_options=extra)

    def push_with_fallback(self, remote: str, branches: List[str],
                           auth_header: Optional[str] = None,
                           auth_url: Optional[str] = None) -> str:
        """Push the first branch name that succeeds

        Returns:
            The branch that was pushed

        Raises:
            PushError: If every branch fails
        """
        last_error: Optional[GitError] = None
        for branch in branches:
            try:
                self.push(remote, branch, auth_header=auth_header, auth_url=auth_url)
                return branch
            except GitError as e:
                logger.info("Push of '%s' failed, trying next branch", branch)
                last_error = e

        raise PushError(
            branches,
            returncode=last_error.returncode if last_error else 1,
            stderr=last_error.stderr if last_error else ""
        )
