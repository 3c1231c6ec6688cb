# deploy_pipeline/models/manifest.py
"""Manifest models"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ReleaseSpec:
    """Release reference declared in a deployment manifest"""
    name: str
    version: str
    url: Optional[str] = None  # No url: release is expected to be present already
    sha1: Optional[str] = None

    @property
    def needs_upload(self) -> bool:
        """Check whether the release has a source to upload from"""
        return bool(self.url)


@dataclass(frozen=True)
class ManifestDocument:
    """Interpolated manifest bytes plus the fields derived from them"""
    content: bytes
    name: str
    releases: Tuple[ReleaseSpec, ...] = field(default_factory=tuple)

    def get_release_names(self):
        """Release names in manifest order"""
        return [release.name for release in self.releases]
