"""Tests for configuration models."""

import pytest

from render_deploy.models.config import DeployConfig, GitConfig, GitHubConfig


class TestDeployConfig:
    def test_defaults(self):
        config = DeployConfig()
        assert config.source_dir == "trip-planner"
        assert config.service.name == "trip-planner"
        assert config.service.start_command == "uvicorn app.main:app --host 0.0.0.0 --port $PORT"
        assert config.github.api_url == "https://api.github.com"
        assert config.github.private is True
        assert config.git.branches == ["master", "main"]
        assert config.git.commit_message == "Initial commit for Render deployment"
        assert config.prerequisites == ["curl", "jq", "git"]

    def test_from_none_is_default(self):
        assert DeployConfig.from_dict(None) == DeployConfig()

    def test_from_dict_overrides(self):
        config = DeployConfig.from_dict({
            "source_dir": "planner",
            "service": {"name": "planner-api"},
            "github": {"api_url": "https://ghe.example.com/api/v3/", "timeout": 5},
            "git": {"branches": ["main"], "author_name": "Deploy Bot"},
            "prerequisites": ["git"],
        })
        assert config.source_dir == "planner"
        assert config.service.name == "planner-api"
        assert config.service.type == "web"
        assert config.github.api_url == "https://ghe.example.com/api/v3"
        assert config.github.timeout == 5
        assert config.git.branches == ["main"]
        assert config.prerequisites == ["git"]

    def test_round_trip_dict(self):
        config = DeployConfig.from_dict({"git": {"author_email": "bot@example.com"}})
        assert DeployConfig.from_dict(config.to_dict()) == config

    def test_section_must_be_mapping(self):
        with pytest.raises(ValueError, match="'service' section"):
            DeployConfig.from_dict({"service": ["web"]})

    def test_prerequisites_must_be_list(self):
        with pytest.raises(ValueError, match="prerequisites"):
            DeployConfig.from_dict({"prerequisites": "git"})


class TestGitConfig:
    def test_empty_branches_rejected(self):
        with pytest.raises(ValueError):
            GitConfig(branches=[])

    def test_identity_options(self):
        config = GitConfig(author_name="Deploy Bot", author_email="bot@example.com")
        assert config.identity_options() == [
            "-c", "user.name=Deploy Bot",
            "-c", "user.email=bot@example.com",
        ]

    def test_no_identity_options_by_default(self):
        assert GitConfig().identity_options() == []


class TestGitHubConfig:
    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            GitHubConfig(timeout=0)
