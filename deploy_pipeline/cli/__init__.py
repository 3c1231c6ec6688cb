"""Command line interface for deploy-pipeline"""

from .main import cli, main

__all__ = ["cli", "main"]
