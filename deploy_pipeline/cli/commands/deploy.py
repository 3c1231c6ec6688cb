"""Deploy command implementation"""

import sys

import click
from rich.console import Console

from ..decorators import variable_options
from ..utils.output import format_deploy_result
from ..utils.ui import RichUI
from ...api import Deployer
from ...models import SkipDrain

console = Console()

SKIP_DRAIN_ALL = "*"


def parse_skip_drain(value) -> SkipDrain:
    """Turn the --skip-drain value into a directive"""
    if value is None:
        return SkipDrain()
    if value == SKIP_DRAIN_ALL:
        return SkipDrain(all=True)
    groups = [group.strip() for group in value.split(',') if group.strip()]
    if not groups:
        return SkipDrain(all=True)
    return SkipDrain.for_groups(groups)


@click.command()
@click.argument('manifest', type=click.File('rb'))
@click.option('-d', '--deployment', required=True, envvar='DEPLOY_PIPELINE_DEPLOYMENT',
              help='Name of the deployment to update')
@click.option('--recreate', is_flag=True, help='Recreate all VMs in the deployment')
@click.option('--skip-drain', 'skip_drain', is_flag=False, flag_value=SKIP_DRAIN_ALL,
              default=None, metavar='[GROUP,...]',
              help='Skip drain scripts for all instance groups, or only for the groups '
                   'given as --skip-drain=GROUP,... (a list must be joined with "=")')
@click.option('-n', '--non-interactive', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
@variable_options
def deploy(ctx, manifest, deployment, recreate, skip_drain, non_interactive, variables):
    """Update a deployment from MANIFEST

    MANIFEST may contain ((name)) placeholders which are resolved from
    --var values first and then from vars files in the order given.

    Examples:

        # Update with variables
        deploy-pipeline deploy manifest.yml -d cf -v system_domain=example.com -l vars.yml

        # Recreate VMs, skip drain for the router group only
        deploy-pipeline deploy manifest.yml -d cf --recreate --skip-drain=router
    """
    config = ctx.obj.config
    ui = RichUI(console=console, non_interactive=non_interactive or config.non_interactive)

    console.print(f"Using deployment [bold]'{deployment}'[/bold]\n")

    deployer = Deployer(config=config, ui=ui)
    result = deployer.deploy(
        manifest.read(),
        variables=variables,
        deployment=deployment,
        recreate=recreate,
        skip_drain=parse_skip_drain(skip_drain)
    )

    format_deploy_result(result)

    if not result.success:
        sys.exit(1)
