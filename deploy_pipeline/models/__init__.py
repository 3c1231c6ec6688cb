# deploy_pipeline/models/__init__.py
"""Data models for deploy-pipeline"""

from .variables import VarKV, VariableSet
from .manifest import ManifestDocument, ReleaseSpec
from .release import ParsedVersion, UploadReleaseOpts
from .diff import ChangeMarker, DiffLine
from .update import DeployRequest, SkipDrain, UpdateRequest
from .result import DeployResult, PipelineRun, PipelineState
from .config import Config

__all__ = [
    # Variable models
    "VarKV",
    "VariableSet",

    # Manifest models
    "ManifestDocument",
    "ReleaseSpec",

    # Release models
    "ParsedVersion",
    "UploadReleaseOpts",

    # Diff models
    "ChangeMarker",
    "DiffLine",

    # Update models
    "DeployRequest",
    "SkipDrain",
    "UpdateRequest",

    # Result models
    "DeployResult",
    "PipelineRun",
    "PipelineState",

    # Config models
    "Config",
]
