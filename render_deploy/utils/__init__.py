"""Utility functions"""

from .git_utils import GitRepository, get_remote_url, redact_command

__all__ = ['GitRepository', 'get_remote_url', 'redact_command']
