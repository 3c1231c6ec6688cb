# deploy_pipeline/cli/main.py
"""Main CLI entry point for deploy-pipeline"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..exceptions import ConfigError
from ..models import Config
from ..services import ConfigService
from .commands import deploy, interpolate, releases

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False, default_level: str = "WARNING") -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        default_level: Level used when neither flag is given
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, default_level.upper(), logging.WARNING)

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context"""
        self.config_path = config_path
        self._config: Optional[Config] = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False

    @property
    def config(self) -> Config:
        """Get configuration (lazy loading)

        Exits with status 1 when the configuration is invalid.
        """
        if self._config is None:
            try:
                self._config = ConfigService(config_path=self.config_path).load_config()
            except ConfigError as e:
                console.print(f"[red]Error: {e}[/red]")
                sys.exit(1)
            if not (self.verbose or self.debug or self.quiet):
                logging.getLogger().setLevel(self._config.log_level)
        return self._config


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Deploy Pipeline - Update deployments from templated manifests

    Interpolates manifest variables, checks the manifest against the
    targeted deployment, shows the diff, asks for confirmation, uploads
    releases that declare a url and finally updates the deployment.
    """
    ctx.obj = Context(config_path=config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.quiet = quiet

    # Setup logging
    if quiet:
        setup_logging(default_level="ERROR")
    else:
        setup_logging(verbose=verbose, debug=debug)


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(interpolate.interpolate)
cli.add_command(releases.releases)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
