"""Deployer API for update operations"""

import logging
import threading
from typing import Optional

from ..core import (
    RecordStore,
    ReleaseUploader,
    UpdateOrchestrator,
    UserInterface,
    VariableResolver,
)
from ..exceptions import DeployPipelineError
from ..models import (
    Config,
    DeployRequest,
    DeployResult,
    PipelineRun,
    SkipDrain,
    VariableSet,
)
from ..storage import FilesystemRecordStore, FilesystemReleaseUploader

logger = logging.getLogger(__name__)


class Deployer:
    """Deployer class for update operations"""

    def __init__(self,
                 config: Optional[Config] = None,
                 record_store: Optional[RecordStore] = None,
                 uploader: Optional[ReleaseUploader] = None,
                 ui: Optional[UserInterface] = None,
                 cancel_event: Optional[threading.Event] = None):
        """
        Initialize deployer

        Collaborators that are not given are backed by the local state
        directory from ``config``.

        Args:
            config: Runtime configuration
            record_store: Record store of the targeted deployment
            uploader: Release uploader
            ui: User interface
            cancel_event: Cancels the running update when set
        """
        self.config = config or Config()
        self.record_store = record_store
        self.uploader = uploader
        self.ui = ui
        self.cancel_event = cancel_event

    def _get_ui(self) -> UserInterface:
        if self.ui is None:
            from ..cli.utils.ui import RichUI
            self.ui = RichUI(non_interactive=self.config.non_interactive)
        return self.ui

    def _get_record_store(self, deployment: Optional[str]) -> RecordStore:
        if self.record_store is not None:
            return self.record_store
        if not deployment:
            raise ValueError("Deployment name is required")
        return FilesystemRecordStore(self.config.state_path, deployment)

    def _get_uploader(self) -> ReleaseUploader:
        if self.uploader is None:
            self.uploader = FilesystemReleaseUploader(self.config.state_path)
        return self.uploader

    def deploy(self,
               manifest: bytes,
               variables: Optional[VariableSet] = None,
               deployment: Optional[str] = None,
               recreate: bool = False,
               skip_drain: Optional[SkipDrain] = None) -> DeployResult:
        """
        Run the update pipeline

        Args:
            manifest: Raw manifest bytes
            variables: Variables for interpolation
            deployment: Targeted deployment (required without a record store)
            recreate: Recreate every VM
            skip_drain: Instance groups that skip drain scripts

        Returns:
            DeployResult: failures are reported in the result, not raised
        """
        record_store = self._get_record_store(deployment)
        orchestrator = UpdateOrchestrator(
            record_store,
            self._get_uploader(),
            self._get_ui(),
            cancel_event=self.cancel_event
        )
        request = DeployRequest(
            manifest=manifest,
            variables=variables or VariableSet(),
            recreate=recreate,
            skip_drain=skip_drain or SkipDrain()
        )

        try:
            run = orchestrator.run(request)
        except DeployPipelineError as e:
            run = orchestrator.current_run
            if run is None:
                run = PipelineRun(deployment=deployment or "")
                run.abort(str(e))
            return DeployResult.from_run(run, e)

        logger.info("Deployment '%s' finished in %.1fs", run.deployment, run.duration)
        return DeployResult.from_run(run)

    def interpolate(self, manifest: bytes, variables: Optional[VariableSet] = None) -> bytes:
        """
        Interpolate a manifest without contacting any collaborator

        Raises:
            MissingVariableError: If a placeholder cannot be resolved
        """
        return VariableResolver(variables or VariableSet()).interpolate(manifest)


def deploy(manifest: bytes,
           deployment: str,
           variables: Optional[VariableSet] = None,
           recreate: bool = False,
           skip_drain: Optional[SkipDrain] = None,
           config: Optional[Config] = None) -> DeployResult:
    """
    Convenience function for updating a deployment

    Args:
        manifest: Raw manifest bytes
        deployment: Targeted deployment
        variables: Variables for interpolation
        recreate: Recreate every VM
        skip_drain: Instance groups that skip drain scripts
        config: Runtime configuration

    Returns:
        DeployResult
    """
    deployer = Deployer(config=config)
    return deployer.deploy(
        manifest,
        variables=variables,
        deployment=deployment,
        recreate=recreate,
        skip_drain=skip_drain
    )
