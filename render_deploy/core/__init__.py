"""Core modules for render-deploy"""

from .descriptor import build_descriptor, render_descriptor, write_descriptor
from .github_client import GitHubClient, classify_response
from .prerequisites import PrerequisiteChecker, ToolSpec, ToolStatus, BUILTIN_TOOLS
from .staging import StagingArea
from .wizard import DeployWizard

__all__ = [
    'build_descriptor',
    'render_descriptor',
    'write_descriptor',
    'GitHubClient',
    'classify_response',
    'PrerequisiteChecker',
    'ToolSpec',
    'ToolStatus',
    'BUILTIN_TOOLS',
    'StagingArea',
    'DeployWizard',
]
