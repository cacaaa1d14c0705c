"""Descriptor preview command"""

from pathlib import Path

import click

from ..utils.output import format_yaml, print_error, print_success
from ...api.deployer import Deployer
from ...api.exceptions import RenderDeployError
from ...constants import DESCRIPTOR_FILE


@click.command()
@click.option('--weatherbit-key', default='', help='WeatherBit API key')
@click.option('--openai-key', default='', help='OpenAI API key')
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Write the descriptor to a file instead of printing it'
)
@click.pass_context
def descriptor(ctx, weatherbit_key, openai_key, output):
    """Preview the render.yaml generated during deploy

    Missing keys switch USE_MOCK_DATA to true, exactly as in a real run.

    Examples:

        render-deploy descriptor
        render-deploy descriptor --weatherbit-key KEY --openai-key KEY -o render.yaml
    """
    try:
        deployer = Deployer(config_path=ctx.obj.config_path, working_dir=ctx.obj.working_dir)
    except RenderDeployError as e:
        print_error(str(e))
        ctx.exit(e.exit_code)

    text = deployer.preview_descriptor(weatherbit_key=weatherbit_key, openai_key=openai_key)

    if output:
        output.write_text(text, encoding='utf-8')
        print_success(f"Wrote {output}")
    else:
        format_yaml(text, title=DESCRIPTOR_FILE)
