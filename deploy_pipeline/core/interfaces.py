# deploy_pipeline/core/interfaces.py
"""Abstract collaborators the update pipeline depends on

Concrete implementations are injected into the orchestrator; the pipeline
never constructs them itself. Collaborators report failure by raising.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from ..exceptions import DeployPipelineError, RecordStoreError
from ..models import DiffLine, SkipDrain, UploadReleaseOpts


class RecordStore(ABC):
    """Deployment record store that computes diffs and applies updates"""

    @abstractmethod
    def name(self) -> str:
        """Name of the targeted deployment"""
        pass

    @abstractmethod
    def diff(self, manifest: bytes) -> List[DiffLine]:
        """
        Compute the change between the live deployment and a manifest

        Args:
            manifest: Interpolated manifest bytes

        Returns:
            Ordered diff lines
        """
        pass

    @abstractmethod
    def update(self, manifest: bytes, recreate: bool, skip_drain: SkipDrain) -> None:
        """
        Apply the manifest to the deployment

        Args:
            manifest: Interpolated manifest bytes
            recreate: Recreate every VM
            skip_drain: Instance groups that skip drain scripts
        """
        pass


class ReleaseUploader(ABC):
    """Makes a release available to the record store"""

    @abstractmethod
    def run(self, opts: UploadReleaseOpts) -> None:
        """Upload one release"""
        pass


class UserInterface(ABC):
    """Line output and confirmation prompt"""

    @abstractmethod
    def say(self, line: str) -> None:
        """Print a line exactly as given (including its terminator)"""
        pass

    @abstractmethod
    def ask_for_confirmation(self) -> None:
        """Ask the user to proceed; raise to reject"""
        pass


class VariableSource(ABC):
    """Named mapping of variables, usually backed by a file"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name used in error messages"""
        pass

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Load all variables of this source"""
        pass


def read_deployment_name(record_store: RecordStore) -> str:
    """
    Ask the record store for its deployment name

    Raises:
        RecordStoreError: If the record store fails
    """
    try:
        return record_store.name()
    except DeployPipelineError:
        raise
    except Exception as e:
        raise RecordStoreError(str(e)) from e
