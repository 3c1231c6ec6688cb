"""Releases command implementation"""

import click

from ..utils.output import format_releases
from ...storage import FilesystemReleaseUploader


@click.command()
@click.pass_context
def releases(ctx):
    """List releases registered in the local state directory"""
    registry = FilesystemReleaseUploader(ctx.obj.config.state_path)
    format_releases(registry.list_releases())
