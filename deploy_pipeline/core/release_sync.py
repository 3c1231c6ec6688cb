# deploy_pipeline/core/release_sync.py
"""Release synchronization ahead of the update"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..exceptions import UploadError
from ..models import ReleaseSpec, UploadReleaseOpts
from ..utils.version_utils import parse_version
from .interfaces import ReleaseUploader

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Which releases were uploaded and which were skipped"""
    uploaded: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class ReleaseSynchronizer:
    """Upload manifest releases that declare a source url

    Releases are handled one at a time in manifest order. The first
    failure stops the loop; releases uploaded before it stay uploaded.
    """

    def __init__(self, uploader: ReleaseUploader):
        self.uploader = uploader

    def build_upload_opts(self, release: ReleaseSpec) -> UploadReleaseOpts:
        """
        Build the uploader request for a release

        Raises:
            VersionFormatError: If the release version is malformed
        """
        return UploadReleaseOpts(
            name=release.name,
            url=release.url,
            sha1=release.sha1,
            version=parse_version(release.version)
        )

    def sync(self,
             releases: List[ReleaseSpec],
             report: Optional[SyncReport] = None,
             before_upload: Optional[Callable[[ReleaseSpec], None]] = None) -> SyncReport:
        """
        Synchronize releases

        Args:
            releases: Releases in manifest order
            report: Report to fill in (lets callers see partial progress on failure)
            before_upload: Called before each upload, may raise to stop

        Returns:
            SyncReport

        Raises:
            VersionFormatError: If a release version cannot be parsed
            UploadError: If the uploader fails
        """
        report = report if report is not None else SyncReport()

        for release in releases:
            if not release.needs_upload:
                logger.debug("Skipping release '%s': no url", release.name)
                report.skipped.append(release.name)
                continue

            opts = self.build_upload_opts(release)

            if before_upload is not None:
                before_upload(release)

            logger.info("Uploading release '%s/%s' from %s", opts.name, opts.version, opts.url)
            try:
                self.uploader.run(opts)
            except UploadError:
                raise
            except Exception as e:
                raise UploadError(release.name, str(e)) from e

            report.uploaded.append(release.name)

        return report
