# deploy_pipeline/core/manifest_validator.py
"""Manifest structure and deployment name validation"""

import logging
from typing import Any, Iterable, List

import jsonschema
import yaml

from ..constants import MANIFEST_SCHEMA
from ..exceptions import ManifestValidationError, NameMismatchError
from ..models import ManifestDocument, ReleaseSpec
from ..utils.yaml_utils import load_yaml

logger = logging.getLogger(__name__)


def _format_path(path: Iterable[Any]) -> str:
    text = ""
    for part in path:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else str(part)
    return text or "manifest"


class ManifestValidator:
    """Derive a ManifestDocument from interpolated bytes and check its target"""

    def __init__(self):
        self._schema_validator = jsonschema.Draft7Validator(MANIFEST_SCHEMA)

    def parse(self, manifest: bytes) -> ManifestDocument:
        """
        Parse interpolated manifest bytes

        Args:
            manifest: Interpolated manifest bytes

        Returns:
            ManifestDocument with declared name and releases in manifest order

        Raises:
            ManifestValidationError: If the manifest is malformed
        """
        try:
            data = load_yaml(manifest)
        except yaml.YAMLError as e:
            raise ManifestValidationError(f"Parsing manifest: {e}") from e

        errors = sorted(
            self._schema_validator.iter_errors(data),
            key=lambda error: [str(part) for part in error.absolute_path]
        )
        if errors:
            details = "; ".join(
                f"{_format_path(error.absolute_path)}: {error.message}" for error in errors
            )
            raise ManifestValidationError(f"Manifest validation failed: {details}")

        releases = tuple(self._extract_releases(data.get('releases') or []))

        return ManifestDocument(
            content=manifest,
            name=str(data['name']),
            releases=releases
        )

    def validate(self, document: ManifestDocument, deployment_name: str) -> List[ReleaseSpec]:
        """
        Check that the manifest targets the given deployment

        Args:
            document: Parsed manifest
            deployment_name: Name of the targeted deployment

        Returns:
            Releases in manifest order

        Raises:
            NameMismatchError: If names differ (exact, case-sensitive)
        """
        if document.name != deployment_name:
            raise NameMismatchError(deployment_name, document.name)

        logger.debug(
            "Manifest targets deployment '%s' with %d release(s)",
            deployment_name,
            len(document.releases)
        )
        return list(document.releases)

    @staticmethod
    def _extract_releases(entries: List[dict]) -> List[ReleaseSpec]:
        releases = []
        for entry in entries:
            releases.append(ReleaseSpec(
                name=str(entry['name']),
                version=str(entry['version']),
                url=str(entry['url']) if entry.get('url') else None,
                sha1=str(entry['sha1']) if entry.get('sha1') else None
            ))
        return releases
