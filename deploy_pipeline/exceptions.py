"""Exception definitions for deploy-pipeline"""

from typing import List, Optional

from .constants import ErrorCode, VERSION_FORMAT


class DeployPipelineError(Exception):
    """Base exception for deploy-pipeline"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(DeployPipelineError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class MissingVariableError(DeployPipelineError):
    """One or more placeholders could not be resolved"""

    def __init__(self, names: List[str]):
        message = f"Expected to find variables: {', '.join(names)}"
        super().__init__(message, ErrorCode.MISSING_VARIABLE)
        self.names = list(names)

    @property
    def name(self) -> str:
        """First unresolved placeholder"""
        return self.names[0]


class InterpolationError(DeployPipelineError):
    """A variable value cannot be placed where its placeholder is"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INTERPOLATION_FAILED)


class VariableSourceError(DeployPipelineError):
    """Variable source could not be loaded"""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Loading variables from '{source}': {reason}",
            ErrorCode.VARIABLE_SOURCE_FAILED
        )
        self.source = source


class ManifestValidationError(DeployPipelineError):
    """Manifest is not structurally valid"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_VALIDATION_FAILED)


class NameMismatchError(DeployPipelineError):
    """Manifest targets a different deployment"""

    def __init__(self, expected: str, actual: str):
        message = (
            f"Expected manifest to specify deployment name '{expected}' "
            f"but was '{actual}'"
        )
        super().__init__(message, ErrorCode.NAME_MISMATCH)
        self.expected = expected
        self.actual = actual


class VersionFormatError(DeployPipelineError):
    """Release version does not follow <base>[+<qualifier>]"""

    def __init__(self, version: str):
        message = (
            f"Expected version '{version}' to match version format "
            f"'{VERSION_FORMAT}'"
        )
        super().__init__(message, ErrorCode.VERSION_FORMAT_ERROR)
        self.version = version


class DiffFetchError(DeployPipelineError):
    """Record store failed to compute the manifest diff"""

    def __init__(self, reason: str):
        super().__init__(f"Fetching diff result: {reason}", ErrorCode.DIFF_FETCH_FAILED)


class ConfirmationRejectedError(DeployPipelineError):
    """User did not confirm the update"""

    def __init__(self, reason: str = "Operation cancelled by user"):
        super().__init__(reason, ErrorCode.CONFIRMATION_REJECTED)


class UploadError(DeployPipelineError):
    """Uploading a release failed"""

    def __init__(self, release_name: str, reason: str):
        super().__init__(
            f"Uploading release '{release_name}': {reason}",
            ErrorCode.UPLOAD_FAILED
        )
        self.release_name = release_name


class UpdateError(DeployPipelineError):
    """Record store rejected the update"""

    def __init__(self, deployment: str, reason: str):
        super().__init__(
            f"Updating deployment '{deployment}': {reason}",
            ErrorCode.UPDATE_FAILED
        )
        self.deployment = deployment


class PipelineCancelledError(DeployPipelineError):
    """Pipeline run was cancelled by the caller"""

    def __init__(self, state: str):
        super().__init__(f"Pipeline cancelled before leaving state '{state}'", ErrorCode.CANCELLED)
        self.state = state


class RecordStoreError(DeployPipelineError):
    """Record store could not tell which deployment it targets"""

    def __init__(self, reason: str):
        super().__init__(f"Reading deployment name: {reason}", ErrorCode.RECORD_STORE_FAILED)
