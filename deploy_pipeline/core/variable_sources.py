"""Variable sources: vars files, environment and in-memory mappings"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..exceptions import VariableSourceError
from ..utils.yaml_utils import load_yaml
from .interfaces import VariableSource


class FileVariableSource(VariableSource):
    """Variables loaded from a YAML vars file"""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def load(self) -> Mapping[str, Any]:
        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise VariableSourceError(self.name, e.strerror or str(e)) from e

        try:
            data = load_yaml(content)
        except yaml.YAMLError as e:
            raise VariableSourceError(self.name, f"invalid YAML: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise VariableSourceError(self.name, "expected a mapping of variable names to values")

        return {str(key): value for key, value in data.items()}


class EnvironmentVariableSource(VariableSource):
    """Variables taken from environment variables with a common prefix

    ``PREFIX_name=value`` defines variable ``name``. Values are parsed as
    YAML so structured values can be passed through the environment.
    """

    def __init__(self, prefix: str, environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix if prefix.endswith('_') else f"{prefix}_"
        self.environ = environ if environ is not None else os.environ

    @property
    def name(self) -> str:
        return f"environment ({self.prefix}*)"

    def load(self) -> Mapping[str, Any]:
        variables: Dict[str, Any] = {}
        for key, raw in self.environ.items():
            if not key.startswith(self.prefix) or key == self.prefix:
                continue
            try:
                value = load_yaml(raw)
            except yaml.YAMLError as e:
                raise VariableSourceError(self.name, f"invalid value for '{key}': {e}") from e
            variables[key[len(self.prefix):]] = value
        return variables


class StaticVariableSource(VariableSource):
    """Variables from an in-memory mapping"""

    def __init__(self, variables: Mapping[str, Any], name: str = "static"):
        self._variables = dict(variables)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def load(self) -> Mapping[str, Any]:
        return dict(self._variables)
