"""Command line interface for render-deploy"""

from .main import cli, main

__all__ = ['cli', 'main']
