"""Local collaborators backed by the filesystem"""

from .filesystem import FilesystemRecordStore, FilesystemReleaseUploader, diff_manifests

__all__ = [
    "FilesystemRecordStore",
    "FilesystemReleaseUploader",
    "diff_manifests",
]
