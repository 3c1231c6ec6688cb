"""Shared variable options for commands that interpolate manifests"""

import functools
from pathlib import Path
from typing import Callable, Iterable

import click

from ...core import EnvironmentVariableSource, FileVariableSource
from ...models import VarKV, VariableSet


def _parse_var_kvs(ctx, param, values) -> tuple:
    kvs = []
    for value in values:
        try:
            kvs.append(VarKV.from_string(value))
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param)
    return tuple(kvs)


def build_variable_set(var_kvs: Iterable[VarKV],
                       vars_files: Iterable[Path],
                       vars_env: Iterable[str]) -> VariableSet:
    """
    Assemble a VariableSet from command line values

    Direct variables come first; vars files precede environment prefixes,
    each group in the order given.
    """
    variables = VariableSet(kvs=list(var_kvs))
    for path in vars_files:
        variables.add_source(FileVariableSource(path))
    for prefix in vars_env:
        variables.add_source(EnvironmentVariableSource(prefix))
    return variables


def variable_options(func: Callable) -> Callable:
    """Add --var, --vars-file and --vars-env options

    The decorated command receives a ``variables`` keyword argument.
    """
    @click.option('-v', '--var', 'var_kvs', multiple=True, callback=_parse_var_kvs,
                  metavar='NAME=VALUE', help='Set variable (takes precedence over files)')
    @click.option('-l', '--vars-file', 'vars_files', multiple=True,
                  type=click.Path(exists=True, dir_okay=False, path_type=Path),
                  help='Load variables from a YAML file (first file wins)')
    @click.option('--vars-env', 'vars_env', multiple=True, metavar='PREFIX',
                  help='Load variables from environment variables starting with PREFIX_')
    @functools.wraps(func)
    def wrapper(*args, var_kvs, vars_files, vars_env, **kwargs):
        kwargs['variables'] = build_variable_set(var_kvs, vars_files, vars_env)
        return func(*args, **kwargs)

    return wrapper
