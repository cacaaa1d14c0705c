# render_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import doctor
from . import descriptor

__all__ = [
    "deploy",
    "doctor",
    "descriptor",
]
