"""Shared fixtures and recording fakes for the test suite."""

from typing import List, Optional

import pytest

from deploy_pipeline.core.interfaces import RecordStore, ReleaseUploader, UserInterface
from deploy_pipeline.models import ChangeMarker, DiffLine, SkipDrain, UploadReleaseOpts


class FakeRecordStore(RecordStore):
    """Record store that records every call it receives."""

    def __init__(self, deployment: str = "dep",
                 diff_lines: Optional[List[DiffLine]] = None,
                 diff_error: Optional[Exception] = None,
                 update_error: Optional[Exception] = None,
                 name_error: Optional[Exception] = None):
        self.deployment = deployment
        self.name_error = name_error
        self.diff_lines = diff_lines if diff_lines is not None else []
        self.diff_error = diff_error
        self.update_error = update_error
        self.diff_calls: List[bytes] = []
        self.update_calls: List[tuple] = []

    def name(self) -> str:
        if self.name_error is not None:
            raise self.name_error
        return self.deployment

    def diff(self, manifest: bytes) -> List[DiffLine]:
        self.diff_calls.append(manifest)
        if self.diff_error is not None:
            raise self.diff_error
        return list(self.diff_lines)

    def update(self, manifest: bytes, recreate: bool, skip_drain: SkipDrain) -> None:
        self.update_calls.append((manifest, recreate, skip_drain))
        if self.update_error is not None:
            raise self.update_error


class FakeUploader(ReleaseUploader):
    """Uploader that records requests and fails for chosen release names."""

    def __init__(self, fail_on: Optional[dict] = None):
        self.fail_on = fail_on or {}
        self.calls: List[UploadReleaseOpts] = []

    def run(self, opts: UploadReleaseOpts) -> None:
        self.calls.append(opts)
        if opts.name in self.fail_on:
            raise self.fail_on[opts.name]


class FakeUI(UserInterface):
    """UI that collects output and answers the prompt as configured."""

    def __init__(self, confirm_error: Optional[Exception] = None):
        self.confirm_error = confirm_error
        self.said: List[str] = []
        self.confirmations = 0

    def say(self, line: str) -> None:
        self.said.append(line)

    def ask_for_confirmation(self) -> None:
        self.confirmations += 1
        if self.confirm_error is not None:
            raise self.confirm_error


@pytest.fixture
def record_store() -> FakeRecordStore:
    """Record store for deployment 'dep' with a small diff."""
    return FakeRecordStore(diff_lines=[
        DiffLine("name: dep", ChangeMarker.UNCHANGED),
        DiffLine("instances: 2", ChangeMarker.ADDED),
        DiffLine("instances: 1", ChangeMarker.REMOVED),
    ])


@pytest.fixture
def uploader() -> FakeUploader:
    """Uploader that accepts every release."""
    return FakeUploader()


@pytest.fixture
def ui() -> FakeUI:
    """UI that confirms every prompt."""
    return FakeUI()


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file below tmp_path and return its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
