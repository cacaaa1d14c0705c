# render_deploy/cli/main.py
"""Main CLI entry point for render-deploy"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT

# Import all commands
from .commands import (
    deploy,
    doctor,
    descriptor,
)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        quiet: Only log errors (ERROR level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object"""

    def __init__(self):
        """Initialize CLI context"""
        self.config_path: Optional[Path] = None
        self.working_dir: Path = Path.cwd()
        self.verbose: bool = False
        self.debug: bool = False


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Only log errors (progress output is unaffected)')
@click.option('-c', '--config', 'config_path',
              type=click.Path(dir_okay=False, path_type=Path),
              help='Path to a .render-deploy.yaml configuration file')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Render Deploy - Ship the trip planner service to Render.com

    Stages the application in a temporary directory, generates its
    render.yaml, pushes it to a private GitHub repository and prints
    the remaining Render dashboard steps.
    """
    # Setup logging
    setup_logging(verbose=verbose, debug=debug, quiet=quiet)

    ctx.obj = Context()
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.config_path = config_path


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(doctor.doctor)
cli.add_command(descriptor.descriptor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts (click reports them as Abort)
    - Usage errors
    - Unexpected exceptions with proper error display
    """
    try:
        exit_code = cli(prog_name=APP_NAME, standalone_mode=False)

    except (click.Abort, KeyboardInterrupt):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)

    # ctx.exit() codes come back as the return value outside standalone mode
    sys.exit(exit_code if isinstance(exit_code, int) else 0)


if __name__ == "__main__":
    main()
