"""Filesystem-backed record store and release registry

Layout under the state directory::

    state_dir/
    ├── releases.json
    └── deployments/
        └── <name>/
            ├── manifest.yml
            └── state.json
"""

import difflib
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import (
    DEPLOYMENTS_DIR,
    DEPLOYMENT_MANIFEST_FILE,
    DEPLOYMENT_STATE_FILE,
    RELEASES_INDEX_FILE,
)
from ..core.interfaces import RecordStore, ReleaseUploader
from ..exceptions import UploadError
from ..models import ChangeMarker, DiffLine, SkipDrain, UploadReleaseOpts
from ..utils.file_utils import atomic_write, read_json, write_json
from ..utils.version_utils import is_valid_version, parse_version

logger = logging.getLogger(__name__)


def diff_manifests(current: str, proposed: str) -> List[DiffLine]:
    """
    Line diff between two manifests

    Replaced blocks are reported as removed lines followed by added lines.

    Args:
        current: Manifest currently applied
        proposed: Manifest about to be applied

    Returns:
        Ordered diff lines
    """
    old_lines = current.splitlines()
    new_lines = proposed.splitlines()
    matcher = difflib.SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)

    lines = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            lines.extend(DiffLine(text, ChangeMarker.UNCHANGED) for text in old_lines[i1:i2])
            continue
        if tag in ('replace', 'delete'):
            lines.extend(DiffLine(text, ChangeMarker.REMOVED) for text in old_lines[i1:i2])
        if tag in ('replace', 'insert'):
            lines.extend(DiffLine(text, ChangeMarker.ADDED) for text in new_lines[j1:j2])
    return lines


class FilesystemRecordStore(RecordStore):
    """Deployment records kept in a local state directory"""

    def __init__(self, state_dir: Path, deployment: str):
        """
        Initialize record store

        Args:
            state_dir: Root state directory
            deployment: Name of the targeted deployment
        """
        if not deployment:
            raise ValueError("Deployment name cannot be empty")
        self.state_dir = Path(state_dir)
        self.deployment = deployment
        self.deployment_dir = self.state_dir / DEPLOYMENTS_DIR / deployment

    @property
    def manifest_path(self) -> Path:
        return self.deployment_dir / DEPLOYMENT_MANIFEST_FILE

    @property
    def state_path(self) -> Path:
        return self.deployment_dir / DEPLOYMENT_STATE_FILE

    def name(self) -> str:
        return self.deployment

    def current_manifest(self) -> Optional[bytes]:
        """Manifest of the last successful update, if any"""
        if not self.manifest_path.exists():
            return None
        return self.manifest_path.read_bytes()

    def load_state(self) -> Dict[str, Any]:
        """Metadata recorded by the last update"""
        return read_json(self.state_path, default={})

    def diff(self, manifest: bytes) -> List[DiffLine]:
        current = self.current_manifest() or b""
        return diff_manifests(current.decode('utf-8'), manifest.decode('utf-8'))

    def update(self, manifest: bytes, recreate: bool, skip_drain: SkipDrain) -> None:
        previous = self.load_state()

        atomic_write(self.manifest_path, manifest, mode='wb')
        write_json(self.state_path, {
            'deployment': self.deployment,
            'updated_at': datetime.now().isoformat(),
            'recreate': recreate,
            'skip_drain': skip_drain.to_dict(),
            'revision': previous.get('revision', 0) + 1
        })
        logger.debug("Stored manifest for '%s' at %s", self.deployment, self.manifest_path)


class FilesystemReleaseUploader(ReleaseUploader):
    """Registers releases in a local index

    A release already registered with the same name, version and sha1 is
    left alone; the same name and version with another sha1 is rejected.
    Release content itself is not transferred.
    """

    def __init__(self, state_dir: Path):
        self.state_dir = Path(state_dir)
        self.index_path = self.state_dir / RELEASES_INDEX_FILE

    def list_releases(self) -> List[Dict[str, Any]]:
        """
        Registered releases sorted by name, then version

        Returns:
            List of release records
        """
        releases = read_json(self.index_path, default={}).get('releases', [])

        def sort_key(record):
            version = record.get('version', '')
            if is_valid_version(version):
                return record.get('name', ''), 0, parse_version(version).sort_key()
            return record.get('name', ''), 1, version

        return sorted(releases, key=sort_key)

    def find(self, name: str, version: str) -> Optional[Dict[str, Any]]:
        """Find a registered release"""
        for record in self.list_releases():
            if record.get('name') == name and record.get('version') == version:
                return record
        return None

    def run(self, opts: UploadReleaseOpts) -> None:
        version = str(opts.version)
        existing = self.find(opts.name, version)

        if existing is not None:
            if opts.sha1 and existing.get('sha1') and existing['sha1'] != opts.sha1:
                raise UploadError(
                    opts.name,
                    f"release '{opts.name}/{version}' is already registered "
                    f"with sha1 '{existing['sha1']}', got '{opts.sha1}'"
                )
            logger.info("Release '%s/%s' already registered, skipping", opts.name, version)
            return

        releases = self.list_releases()
        record = opts.to_dict()
        record['uploaded_at'] = datetime.now().isoformat()
        releases.append(record)
        write_json(self.index_path, {'releases': releases})
        logger.info("Registered release '%s/%s'", opts.name, version)
