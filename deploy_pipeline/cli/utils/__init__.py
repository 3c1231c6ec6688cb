"""CLI utility functions"""

from .output import console, format_deploy_result, format_releases
from .ui import RichUI

__all__ = [
    'console',
    'format_deploy_result',
    'format_releases',
    'RichUI',
]
