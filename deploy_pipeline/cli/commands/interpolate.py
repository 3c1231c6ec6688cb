"""Interpolate command implementation"""

import sys

import click
from rich.console import Console

from ..decorators import variable_options
from ...api import Deployer
from ...exceptions import DeployPipelineError

console = Console(stderr=True)


@click.command()
@click.argument('manifest', type=click.File('rb'))
@click.pass_context
@variable_options
def interpolate(ctx, manifest, variables):
    """Print MANIFEST with all variables resolved

    Nothing is diffed, uploaded or updated.
    """
    try:
        result = Deployer(config=ctx.obj.config).interpolate(manifest.read(), variables)
    except DeployPipelineError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    click.echo(result.decode('utf-8'), nl=False)
