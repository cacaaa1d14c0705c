# render_deploy/cli/commands/doctor.py
"""Prerequisite diagnostic command"""

import click

from ..utils.output import console, format_tool_statuses, print_error, print_warning
from ...api.deployer import Deployer
from ...api.exceptions import RenderDeployError


@click.command()
@click.option('--install', is_flag=True, help='Attempt to install missing tools')
@click.pass_context
def doctor(ctx, install):
    """Check that required external tools are available

    Examples:

        # Report tool status
        render-deploy doctor

        # Install missing tools where supported
        render-deploy doctor --install
    """
    console.print("[bold]Render Deploy Diagnostics[/bold]\n")

    try:
        deployer = Deployer(config_path=ctx.obj.config_path, working_dir=ctx.obj.working_dir,
                            console=console)
        statuses = deployer.check(install=install)
    except RenderDeployError as e:
        print_error(str(e))
        ctx.exit(e.exit_code)

    console.print(format_tool_statuses(statuses))

    failed = [s for s in statuses if not s.ok]
    if failed:
        console.print(f"\n[red]{len(failed)} check(s) failed[/red]")
        if not install:
            print_warning("Run with --install to attempt automatic installation")
        ctx.exit(1)

    console.print("\n[green]All prerequisites are installed.[/green]")
