"""Public API for deploy-pipeline"""

from .deployer import Deployer, deploy
from ..exceptions import (
    DeployPipelineError,
    ConfigError,
    MissingVariableError,
    InterpolationError,
    VariableSourceError,
    ManifestValidationError,
    NameMismatchError,
    VersionFormatError,
    DiffFetchError,
    ConfirmationRejectedError,
    UploadError,
    UpdateError,
    PipelineCancelledError,
    RecordStoreError,
)

__all__ = [
    # Main classes
    "Deployer",
    "deploy",

    # Exceptions
    "DeployPipelineError",
    "ConfigError",
    "MissingVariableError",
    "InterpolationError",
    "VariableSourceError",
    "ManifestValidationError",
    "NameMismatchError",
    "VersionFormatError",
    "DiffFetchError",
    "ConfirmationRejectedError",
    "UploadError",
    "UpdateError",
    "PipelineCancelledError",
    "RecordStoreError",
]
