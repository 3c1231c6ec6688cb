# deploy_pipeline/core/orchestrator.py
"""Update pipeline orchestration

A run moves through

    START -> INTERPOLATED -> VALIDATED -> DIFFED -> CONFIRMED
          -> RELEASES_SYNCED -> UPDATED -> DONE

and any failure moves it straight to ABORTED. Aborted runs are never
resumed; the caller starts a new run.
"""

import logging
import threading
from typing import Optional

from ..exceptions import PipelineCancelledError
from ..models import DeployRequest, PipelineRun, PipelineState, UpdateRequest
from .confirmation import ConfirmationGate
from .diff_presenter import DiffPresenter
from .interfaces import RecordStore, ReleaseUploader, UserInterface, read_deployment_name
from .manifest_validator import ManifestValidator
from .release_sync import ReleaseSynchronizer, SyncReport
from .update_committer import UpdateCommitter
from .variable_resolver import VariableResolver

logger = logging.getLogger(__name__)


class UpdateOrchestrator:
    """Sequence the update pipeline against injected collaborators"""

    def __init__(self,
                 record_store: RecordStore,
                 uploader: ReleaseUploader,
                 ui: UserInterface,
                 cancel_event: Optional[threading.Event] = None):
        """
        Initialize orchestrator

        Args:
            record_store: Targeted deployment's record store
            uploader: Release uploader
            ui: Output and confirmation prompt
            cancel_event: Set by the caller to stop the run before its next step
        """
        self.record_store = record_store
        self.ui = ui
        self.cancel_event = cancel_event
        self.validator = ManifestValidator()
        self.diff_presenter = DiffPresenter(record_store, ui)
        self.confirmation = ConfirmationGate(ui)
        self.synchronizer = ReleaseSynchronizer(uploader)
        self.committer = UpdateCommitter(record_store)
        self.current_run: Optional[PipelineRun] = None

    def run(self, request: DeployRequest) -> PipelineRun:
        """
        Execute one pipeline run

        Args:
            request: Manifest, variables and update modifiers

        Returns:
            The finished run (state DONE)

        Raises:
            DeployPipelineError: The error that aborted the run. ``current_run``
                still describes how far the run got.
        """
        # Name stays empty until the record store reports it
        run = PipelineRun(deployment="")
        self.current_run = run

        try:
            deployment = read_deployment_name(self.record_store)
            run.deployment = deployment

            self._check_cancelled(run)
            manifest = VariableResolver(request.variables).interpolate(request.manifest)
            self._advance(run, PipelineState.INTERPOLATED)

            document = self.validator.parse(manifest)
            releases = self.validator.validate(document, deployment)
            self._advance(run, PipelineState.VALIDATED)

            self._check_cancelled(run)
            self.diff_presenter.present(document.content)
            self._advance(run, PipelineState.DIFFED)

            self._check_cancelled(run)
            self.confirmation.confirm(deployment)
            self._advance(run, PipelineState.CONFIRMED)

            report = SyncReport(uploaded=run.uploaded_releases, skipped=run.skipped_releases)
            self.synchronizer.sync(
                releases,
                report,
                before_upload=lambda release: self._check_cancelled(run)
            )
            self._advance(run, PipelineState.RELEASES_SYNCED)

            self._check_cancelled(run)
            run.update_request = UpdateRequest(
                manifest=document.content,
                recreate=request.recreate,
                skip_drain=request.skip_drain
            )
            self.committer.commit(run.update_request, deployment)
            self._advance(run, PipelineState.UPDATED)

            self._advance(run, PipelineState.DONE)

        except KeyboardInterrupt:
            failed_in = run.state
            run.abort("Interrupted")
            logger.warning("Update of '%s' interrupted in state %s", run.deployment, failed_in.value)
            raise

        except Exception as e:
            failed_in = run.state
            run.abort(str(e))
            logger.warning("Update of '%s' aborted in state %s: %s", run.deployment, failed_in.value, e)
            raise

        return run

    def _advance(self, run: PipelineRun, state: PipelineState) -> None:
        run.advance(state)
        logger.info("Deployment '%s': %s", run.deployment, state.value)

    def _check_cancelled(self, run: PipelineRun) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise PipelineCancelledError(run.state.value)
