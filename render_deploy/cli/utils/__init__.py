"""CLI utility functions"""

from .output import (
    console,
    format_deploy_result,
    format_tool_statuses,
    format_yaml,
    print_error,
    print_warning,
    print_success,
)

__all__ = [
    'console',
    'format_deploy_result',
    'format_tool_statuses',
    'format_yaml',
    'print_error',
    'print_warning',
    'print_success',
]
