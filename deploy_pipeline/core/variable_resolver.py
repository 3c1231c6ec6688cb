# deploy_pipeline/core/variable_resolver.py
"""Variable resolution and manifest interpolation"""

import logging
from typing import Any, List, Mapping, Optional, Tuple

import yaml

from ..constants import PLACEHOLDER_PATTERN
from ..exceptions import (
    DeployPipelineError,
    InterpolationError,
    ManifestValidationError,
    MissingVariableError,
    VariableSourceError,
)
from ..models import VariableSet
from ..utils.yaml_utils import dump_yaml, load_yaml

logger = logging.getLogger(__name__)


class VariableResolver:
    """Resolve ((name)) placeholders against a VariableSet

    Lookup is a single ordered chain: direct pairs first, then each source
    in the order it was supplied. The first link that defines a name wins.
    """

    def __init__(self, variables: VariableSet):
        """
        Initialize resolver

        Args:
            variables: Variables for this run
        """
        self.variables = variables
        self._loaded_sources: Optional[List[Tuple[str, Mapping[str, Any]]]] = None

    def load_sources(self) -> List[Tuple[str, Mapping[str, Any]]]:
        """
        Load every variable source once, in order

        Returns:
            List of (source name, variables)

        Raises:
            VariableSourceError: If a source cannot be loaded
        """
        if self._loaded_sources is None:
            loaded = []
            for source in self.variables.sources:
                try:
                    mapping = source.load()
                except DeployPipelineError:
                    raise
                except Exception as e:
                    raise VariableSourceError(source.name, str(e)) from e
                logger.debug("Loaded %d variable(s) from %s", len(mapping), source.name)
                loaded.append((source.name, mapping))
            self._loaded_sources = loaded
        return self._loaded_sources

    def lookup(self, name: str) -> Tuple[bool, Any, Optional[str]]:
        """
        Find a variable value

        Args:
            name: Variable name

        Returns:
            Tuple of (found, value, origin)
        """
        found, value = self.variables.find_kv(name)
        if found:
            return True, value, "var"

        for source_name, mapping in self.load_sources():
            if name in mapping:
                return True, mapping[name], source_name

        return False, None, None

    def interpolate(self, manifest: bytes) -> bytes:
        """
        Replace every placeholder in the manifest

        Args:
            manifest: Raw manifest bytes (left untouched)

        Returns:
            Interpolated manifest bytes

        Raises:
            ManifestValidationError: If the manifest is not valid YAML
            MissingVariableError: If any placeholder cannot be resolved
            InterpolationError: If a structured value is embedded in text
        """
        try:
            document = load_yaml(manifest)
        except yaml.YAMLError as e:
            raise ManifestValidationError(f"Parsing manifest: {e}") from e

        self.load_sources()

        missing: List[str] = []
        result = self._substitute(document, missing)

        if missing:
            raise MissingVariableError(missing)

        return dump_yaml(result)

    def _substitute(self, node: Any, missing: List[str]) -> Any:
        if isinstance(node, dict):
            result = {}
            for key, value in node.items():
                new_key = self._substitute(key, missing) if isinstance(key, str) else key
                try:
                    hash(new_key)
                except TypeError:
                    raise InterpolationError(
                        f"Expected variable in key '{key}' to resolve to a scalar"
                    )
                result[new_key] = self._substitute(value, missing)
            return result

        if isinstance(node, list):
            return [self._substitute(item, missing) for item in node]

        if isinstance(node, str):
            return self._substitute_string(node, missing)

        return node

    def _substitute_string(self, text: str, missing: List[str]) -> Any:
        whole = PLACEHOLDER_PATTERN.fullmatch(text)
        if whole:
            name = whole.group(1)
            found, value, origin = self.lookup(name)
            if not found:
                _record_missing(missing, name)
                return text
            logger.debug("Resolved variable '%s' from %s", name, origin)
            return value

        if not PLACEHOLDER_PATTERN.search(text):
            return text

        def replace(match):
            name = match.group(1)
            found, value, origin = self.lookup(name)
            if not found:
                _record_missing(missing, name)
                return match.group(0)
            if isinstance(value, (dict, list)):
                raise InterpolationError(
                    f"Expected variable '{name}' to be a scalar when used inside '{text}'"
                )
            logger.debug("Resolved variable '%s' from %s", name, origin)
            return _scalar_text(value)

        return PLACEHOLDER_PATTERN.sub(replace, text)


def _record_missing(missing: List[str], name: str) -> None:
    if name not in missing:
        missing.append(name)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def interpolate(manifest: bytes, variables: VariableSet) -> bytes:
    """
    Interpolate a manifest in one call

    Args:
        manifest: Raw manifest bytes
        variables: Variables to resolve against

    Returns:
        Interpolated manifest bytes
    """
    return VariableResolver(variables).interpolate(manifest)
