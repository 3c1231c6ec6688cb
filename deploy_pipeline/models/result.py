"""Pipeline state and result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .update import UpdateRequest


class PipelineState(Enum):
    """States of one update pipeline run"""
    START = "start"
    INTERPOLATED = "interpolated"
    VALIDATED = "validated"
    DIFFED = "diffed"
    CONFIRMED = "confirmed"
    RELEASES_SYNCED = "releases_synced"
    UPDATED = "updated"
    DONE = "done"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.DONE, PipelineState.ABORTED)


# Every non-terminal state has exactly one successor
NEXT_STATE = {
    PipelineState.START: PipelineState.INTERPOLATED,
    PipelineState.INTERPOLATED: PipelineState.VALIDATED,
    PipelineState.VALIDATED: PipelineState.DIFFED,
    PipelineState.DIFFED: PipelineState.CONFIRMED,
    PipelineState.CONFIRMED: PipelineState.RELEASES_SYNCED,
    PipelineState.RELEASES_SYNCED: PipelineState.UPDATED,
    PipelineState.UPDATED: PipelineState.DONE,
}


@dataclass
class PipelineRun:
    """Progress of a single pipeline invocation"""
    deployment: str
    state: PipelineState = PipelineState.START
    history: List[PipelineState] = field(default_factory=lambda: [PipelineState.START])
    abort_reason: Optional[str] = None
    uploaded_releases: List[str] = field(default_factory=list)
    skipped_releases: List[str] = field(default_factory=list)
    update_request: Optional[UpdateRequest] = None
    started_at: datetime = field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None

    def advance(self, state: PipelineState) -> None:
        """Move to the next state

        Raises:
            RuntimeError: If ``state`` is not the successor of the current state
        """
        expected = NEXT_STATE.get(self.state)
        if expected is None or state != expected:
            raise RuntimeError(
                f"Invalid pipeline transition {self.state.value} -> {state.value}"
            )
        self.state = state
        self.history.append(state)
        if state.is_terminal:
            self.finished_at = datetime.now()

    def abort(self, reason: str) -> None:
        """Move to the absorbing aborted state"""
        if self.state.is_terminal:
            return
        self.state = PipelineState.ABORTED
        self.history.append(PipelineState.ABORTED)
        self.abort_reason = reason
        self.finished_at = datetime.now()

    @property
    def duration(self) -> float:
        """Run duration in seconds"""
        end = self.finished_at or datetime.now()
        return (end - self.started_at).total_seconds()


@dataclass
class DeployResult:
    """Deployment operation result"""
    success: bool
    deployment: str
    state: PipelineState
    uploaded_releases: List[str] = field(default_factory=list)
    skipped_releases: List[str] = field(default_factory=list)
    update_request: Optional[UpdateRequest] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    duration: float = 0.0

    @classmethod
    def from_run(cls, run: PipelineRun, error: Optional[Exception] = None) -> 'DeployResult':
        """Create from a finished pipeline run"""
        return cls(
            success=run.state == PipelineState.DONE,
            deployment=run.deployment,
            state=run.state,
            uploaded_releases=list(run.uploaded_releases),
            skipped_releases=list(run.skipped_releases),
            update_request=run.update_request,
            error=str(error) if error else None,
            error_code=getattr(error, 'error_code', None),
            duration=run.duration
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'success': self.success,
            'deployment': self.deployment,
            'state': self.state.value,
            'uploaded_releases': self.uploaded_releases,
            'skipped_releases': self.skipped_releases,
            'duration': self.duration
        }
        if self.update_request:
            data['recreate'] = self.update_request.recreate
            data['skip_drain'] = self.update_request.skip_drain.to_dict()
        if self.error:
            data['error'] = self.error
            data['error_code'] = self.error_code
        return data
