"""Tests for the Deployer API."""

from unittest.mock import patch

import pytest
import yaml

from render_deploy.api import ConfigError, Deployer
from render_deploy.models.config import DeployConfig, ServiceConfig


class TestDeployer:
    def test_loads_config_from_working_dir(self, tmp_path, quiet_console):
        (tmp_path / ".render-deploy.yaml").write_text("source_dir: planner\n")
        deployer = Deployer(working_dir=tmp_path, console=quiet_console)
        assert deployer.config.source_dir == "planner"

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(ConfigError):
            Deployer(config_path=tmp_path / "missing.yaml", working_dir=tmp_path)

    def test_preview_descriptor(self, tmp_path):
        config = DeployConfig(service=ServiceConfig(name="planner-staging"))
        deployer = Deployer(config=config, working_dir=tmp_path)

        document = yaml.safe_load(deployer.preview_descriptor(weatherbit_key="wb"))
        service = document["services"][0]
        env = {e["key"]: e for e in service["envVars"]}

        assert service["name"] == "planner-staging"
        assert env["WEATHERBIT_API_KEY"]["value"] == "wb"
        assert env["USE_MOCK_DATA"]["value"] == "true"

    def test_check_without_install_does_not_install(self, tmp_path, quiet_console):
        deployer = Deployer(config=DeployConfig(prerequisites=["jq"]), working_dir=tmp_path,
                            console=quiet_console)
        with patch("render_deploy.api.deployer.PrerequisiteChecker") as checker_cls:
            deployer.check()
        checker_cls.return_value.check_all.assert_called_once_with()
        checker_cls.return_value.ensure_all.assert_not_called()

    def test_check_with_install(self, tmp_path, quiet_console):
        deployer = Deployer(config=DeployConfig(prerequisites=["jq"]), working_dir=tmp_path,
                            console=quiet_console)
        with patch("render_deploy.api.deployer.PrerequisiteChecker") as checker_cls:
            deployer.check(install=True)
        checker_cls.return_value.ensure_all.assert_called_once_with()

    def test_unknown_prerequisite(self, tmp_path):
        deployer = Deployer(config=DeployConfig(prerequisites=["docker"]), working_dir=tmp_path)
        with pytest.raises(ConfigError):
            deployer.check()
