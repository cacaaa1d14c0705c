"""Tests for the command line interface."""

import logging
import sys
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from render_deploy.__version__ import __version__
from render_deploy.api.exceptions import AuthenticationError, GitError, PrerequisiteError
from render_deploy.cli.main import cli, main
from render_deploy.core.prerequisites import ToolStatus
from render_deploy.models.result import DeployResult, OperationStatus


class TestCLIHelp:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Render Deploy" in result.output
        for command in ("deploy", "doctor", "descriptor"):
            assert command in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_deploy_help(self):
        result = CliRunner().invoke(cli, ["deploy", "--help"])
        assert result.exit_code == 0
        assert "--keep-staging" in result.output


class TestDescriptorCommand:
    def test_writes_file(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["descriptor", "--weatherbit-key", "wb",
                                         "--openai-key", "sk", "-o", "render.yaml"])
            assert result.exit_code == 0, result.output
            with open("render.yaml") as f:
                document = yaml.safe_load(f)

        env = {e["key"]: e for e in document["services"][0]["envVars"]}
        assert env["USE_MOCK_DATA"]["value"] == "false"
        assert env["API_PORT"]["sync"] is False

    def test_prints_preview(self):
        result = CliRunner().invoke(cli, ["descriptor"])
        assert result.exit_code == 0
        assert "USE_MOCK_DATA" in result.output

    def test_uses_config_file(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open(".render-deploy.yaml", "w") as f:
                f.write("service:\n  name: planner-staging\n")
            runner.invoke(cli, ["descriptor", "-o", "render.yaml"])
            with open("render.yaml") as f:
                document = yaml.safe_load(f)
        assert document["services"][0]["name"] == "planner-staging"

    def test_invalid_config_exits_1(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("bad.yaml", "w") as f:
                f.write("git:\n  branches: []\n")
            result = runner.invoke(cli, ["--config", "bad.yaml", "descriptor"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestDoctorCommand:
    def test_all_present(self):
        statuses = [ToolStatus(name="git", found=True, version="2.43.0", message="Found")]
        with patch("render_deploy.cli.commands.doctor.Deployer.check", return_value=statuses):
            result = CliRunner().invoke(cli, ["doctor"])
        assert result.exit_code == 0
        assert "All prerequisites are installed" in result.output

    def test_missing_tool_exits_1(self):
        statuses = [
            ToolStatus(name="curl", found=True, version="8.5.0"),
            ToolStatus(name="jq", found=False, message="jq is not installed"),
        ]
        with patch("render_deploy.cli.commands.doctor.Deployer.check", return_value=statuses):
            result = CliRunner().invoke(cli, ["doctor"])
        assert result.exit_code == 1
        assert "--install" in result.output

    def test_install_failure(self):
        error = PrerequisiteError("jq", "Could not install jq automatically.")
        with patch("render_deploy.cli.commands.doctor.Deployer.check", side_effect=error):
            result = CliRunner().invoke(cli, ["doctor", "--install"])
        assert result.exit_code == 1
        assert "Could not install jq" in result.output


class TestDeployCommand:
    def test_success(self):
        deploy_result = DeployResult(status=OperationStatus.SUCCESS, message="Deployment handed off to Render")
        with patch("render_deploy.cli.commands.deploy.Deployer.run", return_value=deploy_result) as run:
            result = CliRunner().invoke(cli, ["deploy", "--keep-staging"])
        assert result.exit_code == 0
        assert run.call_args.kwargs["keep_staging"] is True

    def test_bad_credentials_exit_code(self):
        with patch("render_deploy.cli.commands.deploy.Deployer.run", side_effect=AuthenticationError()):
            result = CliRunner().invoke(cli, ["deploy"])
        assert result.exit_code == 1
        assert "Invalid GitHub token" in result.output

    def test_git_failure_propagates_exit_code(self):
        error = GitError("git commit failed with exit code 128", returncode=128)
        with patch("render_deploy.cli.commands.deploy.Deployer.run", side_effect=error):
            result = CliRunner().invoke(cli, ["deploy"])
        assert result.exit_code == 128


class TestMainEntryPoint:
    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("RENDER_DEPLOY_CONFIG", raising=False)

    def _run_main(self, monkeypatch, *args):
        monkeypatch.setattr(sys, "argv", ["render-deploy", *args])
        with pytest.raises(SystemExit) as exc_info:
            main()
        return exc_info.value.code

    def test_ctrl_c_during_deploy_exits_130(self, monkeypatch):
        with patch("render_deploy.cli.commands.deploy.Deployer.run", side_effect=KeyboardInterrupt):
            assert self._run_main(monkeypatch, "deploy") == 130

    def test_git_exit_code_survives_main(self, monkeypatch):
        error = GitError("git push failed with exit code 128", returncode=128)
        with patch("render_deploy.cli.commands.deploy.Deployer.run", side_effect=error):
            assert self._run_main(monkeypatch, "deploy") == 128

    def test_success_exits_0(self, monkeypatch):
        deploy_result = DeployResult(status=OperationStatus.SUCCESS)
        with patch("render_deploy.cli.commands.deploy.Deployer.run", return_value=deploy_result):
            assert self._run_main(monkeypatch, "deploy") == 0

    def test_usage_error_exits_2(self, monkeypatch):
        assert self._run_main(monkeypatch, "no-such-command") == 2

    def test_version_exits_0(self, monkeypatch):
        assert self._run_main(monkeypatch, "--version") == 0


class TestQuietOption:
    def test_quiet_does_not_disable_logging_globally(self):
        result = CliRunner().invoke(cli, ["-q", "descriptor"])
        assert result.exit_code == 0
        assert logging.root.manager.disable == logging.NOTSET
