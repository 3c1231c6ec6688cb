"""CLI decorators"""

from .variables import build_variable_set, variable_options

__all__ = [
    'build_variable_set',
    'variable_options',
]
