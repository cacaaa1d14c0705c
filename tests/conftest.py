"""Shared fixtures for render-deploy tests."""

import io
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from rich.console import Console

from render_deploy.models.credentials import ApiKeys, GitHubCredentials


class FakeGitRunner:
    """Records git invocations and answers them without touching disk.

    ``fail_when`` receives the argument list (without the leading
    ``git`` and ``-c`` options) and returns a non-zero exit code to
    simulate a failure, or 0.
    """

    def __init__(self, fail_when: Optional[Callable[[List[str]], int]] = None):
        self.calls: List[List[str]] = []
        self.fail_when = fail_when or (lambda args: 0)
        self.remotes = {}

    @staticmethod
    def strip_options(command: List[str]) -> List[str]:
        args = command[1:]
        while args and args[0] == "-c":
            args = args[2:]
        return args

    @property
    def subcommands(self) -> List[List[str]]:
        return [self.strip_options(c) for c in self.calls]

    def __call__(self, command, cwd=None, capture_output=False, text=False, check=False):
        self.calls.append(list(command))
        args = self.strip_options(command)

        returncode = self.fail_when(args)
        if returncode:
            if check:
                raise subprocess.CalledProcessError(returncode, command, stderr="simulated failure")
            return subprocess.CompletedProcess(command, returncode, "", "simulated failure")

        stdout = ""
        if args[:2] == ["remote", "add"]:
            self.remotes[args[2]] = args[3]
        elif args[:2] == ["remote", "get-url"]:
            stdout = self.remotes.get(args[2], "") + "\n"
        return subprocess.CompletedProcess(command, 0, stdout, "")


class FakeWizard:
    """Answers the deployment prompts from fixed values."""

    def __init__(self, api_keys: ApiKeys = None, github: GitHubCredentials = None):
        self.api_keys = api_keys or ApiKeys()
        self.github = github or GitHubCredentials("octocat", "trip-planner-prod", "ghp_secret")
        self.asked = []

    def collect_api_keys(self) -> ApiKeys:
        self.asked.append("api_keys")
        return self.api_keys

    def collect_github(self) -> GitHubCredentials:
        self.asked.append("github")
        return self.github


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def git_runner():
    return FakeGitRunner()


@pytest.fixture
def wizard():
    return FakeWizard()


@pytest.fixture
def source_tree(tmp_path) -> Path:
    """A minimal trip planner source tree."""
    root = tmp_path / "trip-planner"
    (root / "app" / "data").mkdir(parents=True)
    (root / "app" / "main.py").write_text("app = None\n")
    (root / "app" / "data" / "mock_weather_data.json").write_text('{"stale": true}\n')
    (root / "requirements.txt").write_text("fastapi\nuvicorn\n")
    (root / ".env.example").write_text("OPENAI_API_KEY=\n")
    return root


@pytest.fixture
def git_runner_factory():
    return FakeGitRunner


@pytest.fixture
def wizard_factory():
    return FakeWizard
