"""Core functionality for deploy-pipeline"""

from .interfaces import RecordStore, ReleaseUploader, UserInterface, VariableSource
from .variable_sources import EnvironmentVariableSource, FileVariableSource, StaticVariableSource
from .variable_resolver import VariableResolver, interpolate
from .manifest_validator import ManifestValidator
from .diff_presenter import DiffPresenter, render_diff_line
from .confirmation import ConfirmationGate
from .release_sync import ReleaseSynchronizer, SyncReport
from .update_committer import UpdateCommitter
from .orchestrator import UpdateOrchestrator

__all__ = [
    "RecordStore",
    "ReleaseUploader",
    "UserInterface",
    "VariableSource",
    "EnvironmentVariableSource",
    "FileVariableSource",
    "StaticVariableSource",
    "VariableResolver",
    "interpolate",
    "ManifestValidator",
    "DiffPresenter",
    "render_diff_line",
    "ConfirmationGate",
    "ReleaseSynchronizer",
    "SyncReport",
    "UpdateCommitter",
    "UpdateOrchestrator",
]
