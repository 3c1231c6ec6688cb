# deploy_pipeline/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import interpolate
from . import releases

__all__ = [
    "deploy",
    "interpolate",
    "releases",
]
