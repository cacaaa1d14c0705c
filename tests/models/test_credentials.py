"""Tests for credential models."""

import base64

import pytest

from render_deploy.models.credentials import ApiKeys, GitHubCredentials


class TestApiKeys:
    @pytest.mark.parametrize("weatherbit,openai,expected", [
        ("", "", True),
        ("wb-key", "", True),
        ("", "sk-key", True),
        ("wb-key", "sk-key", False),
    ])
    def test_use_mock_data(self, weatherbit, openai, expected):
        assert ApiKeys(weatherbit=weatherbit, openai=openai).use_mock_data is expected

    def test_defaults_use_mock_data(self):
        assert ApiKeys().use_mock_data is True


class TestGitHubCredentials:
    def test_full_name(self):
        creds = GitHubCredentials("octocat", "planner", "ghp_x")
        assert creds.full_name == "octocat/planner"

    def test_repr_hides_token(self):
        creds = GitHubCredentials("octocat", "planner", "ghp_supersecret")
        assert "ghp_supersecret" not in repr(creds)
        assert "octocat" in repr(creds)

    def test_basic_auth_header(self):
        header = GitHubCredentials("octocat", "planner", "ghp_x").basic_auth_header()
        assert header.startswith("Basic ")
        assert base64.b64decode(header[len("Basic "):]) == b"octocat:ghp_x"
