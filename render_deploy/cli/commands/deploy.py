"""Deploy command"""

from pathlib import Path

import click

from ..utils.output import console, format_deploy_result, print_error
from ...api.deployer import Deployer
from ...api.exceptions import RenderDeployError


@click.command()
@click.option(
    '--source', '-s', 'source_dir',
    type=click.Path(file_okay=False, path_type=Path),
    help='Application source directory (default: trip-planner)'
)
@click.option(
    '--keep-staging',
    is_flag=True,
    help='Keep the temporary staging directory after the run'
)
@click.pass_context
def deploy(ctx, source_dir, keep_staging):
    """Deploy the trip planner service to Render.com

    Prompts for API keys and GitHub credentials, pushes the staged
    application to a private GitHub repository and prints the steps
    left to finish in the Render dashboard.

    Examples:

        # Deploy ./trip-planner
        render-deploy deploy

        # Deploy another source tree and keep the staged copy
        render-deploy deploy --source ../planner --keep-staging
    """
    try:
        deployer = Deployer(
            config_path=ctx.obj.config_path,
            working_dir=ctx.obj.working_dir,
            console=console
        )
        result = deployer.run(source_dir=source_dir, keep_staging=keep_staging)

    except RenderDeployError as e:
        print_error(str(e))
        if ctx.obj.debug and e.error_code:
            console.print(f"[dim]Error code: {e.error_code}[/dim]")
        ctx.exit(e.exit_code)

    if ctx.obj.verbose:
        format_deploy_result(result)
