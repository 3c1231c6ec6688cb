"""Deploy Pipeline - update deployments from templated manifests.

Resolves manifest variables, checks the manifest against the targeted
deployment, shows the diff, asks for confirmation, uploads releases that
declare a source url and finally updates the deployment.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api.deployer import Deployer, deploy
from .core import UpdateOrchestrator, VariableResolver, interpolate

# Data models
from .models import (
    DeployRequest,
    DeployResult,
    DiffLine,
    ManifestDocument,
    ParsedVersion,
    PipelineState,
    ReleaseSpec,
    SkipDrain,
    UpdateRequest,
    VarKV,
    VariableSet,
)

# Exceptions
from .exceptions import (
    DeployPipelineError,
    MissingVariableError,
    NameMismatchError,
    VersionFormatError,
    DiffFetchError,
    ConfirmationRejectedError,
    UploadError,
    UpdateError,
)

# Utility functions
from .utils import parse_version, compare_versions

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Deployer",
    "UpdateOrchestrator",
    "VariableResolver",

    # Core API functions
    "deploy",
    "interpolate",

    # Data models
    "DeployRequest",
    "DeployResult",
    "DiffLine",
    "ManifestDocument",
    "ParsedVersion",
    "PipelineState",
    "ReleaseSpec",
    "SkipDrain",
    "UpdateRequest",
    "VarKV",
    "VariableSet",

    # Exceptions
    "DeployPipelineError",
    "MissingVariableError",
    "NameMismatchError",
    "VersionFormatError",
    "DiffFetchError",
    "ConfirmationRejectedError",
    "UploadError",
    "UpdateError",

    # Utility functions
    "parse_version",
    "compare_versions",
]
