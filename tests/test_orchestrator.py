"""Tests for the update pipeline as a whole."""

import threading

import pytest

from deploy_pipeline.core import UpdateOrchestrator
from deploy_pipeline.exceptions import (
    ConfirmationRejectedError,
    DiffFetchError,
    MissingVariableError,
    NameMismatchError,
    PipelineCancelledError,
    RecordStoreError,
    UpdateError,
    UploadError,
    VersionFormatError,
)
from deploy_pipeline.models import (
    DeployRequest,
    PipelineRun,
    PipelineState,
    SkipDrain,
    VarKV,
    VariableSet,
)

from tests.conftest import FakeRecordStore, FakeUI, FakeUploader

THREE_RELEASES = (
    b"name: dep\n"
    b"releases:\n"
    b"- name: a\n"
    b"  version: '1'\n"
    b"  url: https://example.com/a.tgz\n"
    b"- name: b\n"
    b"  version: '2'\n"
    b"  url: https://example.com/b.tgz\n"
    b"- name: c\n"
    b"  version: '3'\n"
    b"  url: https://example.com/c.tgz\n"
)


def _run(record_store, uploader, ui, manifest, **kwargs):
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)
    return orchestrator, orchestrator.run(DeployRequest(manifest=manifest, **kwargs))


def test_successful_run_visits_every_state(record_store, uploader, ui) -> None:
    """A clean run ends in DONE after passing every step once."""
    _, run = _run(record_store, uploader, ui, b"name: dep\n")

    assert run.state is PipelineState.DONE
    assert run.history == [
        PipelineState.START,
        PipelineState.INTERPOLATED,
        PipelineState.VALIDATED,
        PipelineState.DIFFED,
        PipelineState.CONFIRMED,
        PipelineState.RELEASES_SYNCED,
        PipelineState.UPDATED,
        PipelineState.DONE,
    ]
    assert ui.confirmations == 1
    assert record_store.update_calls == [(b"name: dep\n", False, SkipDrain())]


def test_update_receives_interpolated_manifest_and_modifiers(record_store, uploader, ui) -> None:
    """The record store sees the interpolated bytes with recreate and skip-drain."""
    skip_drain = SkipDrain.for_groups(["router"])
    _, run = _run(
        record_store, uploader, ui,
        b"name: dep\ninstances: ((count))\n",
        variables=VariableSet(kvs=[VarKV("count", "3")]),
        recreate=True,
        skip_drain=skip_drain,
    )

    expected = b"name: dep\ninstances: '3'\n"
    assert record_store.diff_calls == [expected]
    assert record_store.update_calls == [(expected, True, skip_drain)]
    assert run.update_request.manifest == expected


def test_diff_is_shown_before_confirmation(record_store, uploader) -> None:
    events = []

    class OrderedUI(FakeUI):
        def say(self, line):
            events.append("say")
            super().say(line)

        def ask_for_confirmation(self):
            events.append("confirm")
            super().ask_for_confirmation()

    _run(record_store, uploader, OrderedUI(), b"name: dep\n")

    assert events == ["say", "say", "say", "confirm"]


def test_missing_variable_touches_nothing(record_store, uploader, ui) -> None:
    with pytest.raises(MissingVariableError):
        _run(record_store, uploader, ui, b"name: ((name))\n")

    assert record_store.diff_calls == []
    assert ui.confirmations == 0
    assert uploader.calls == []
    assert record_store.update_calls == []


def test_name_mismatch_halts_everything(record_store, uploader, ui) -> None:
    """No diff, prompt, upload or update happens for the wrong deployment."""
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)

    with pytest.raises(NameMismatchError):
        orchestrator.run(DeployRequest(manifest=b"name: other-name\n"))

    assert record_store.diff_calls == []
    assert ui.said == []
    assert ui.confirmations == 0
    assert uploader.calls == []
    assert record_store.update_calls == []
    assert orchestrator.current_run.state is PipelineState.ABORTED
    assert orchestrator.current_run.history[-2] is PipelineState.INTERPOLATED


def test_releases_without_url_are_skipped_in_order(record_store, uploader, ui) -> None:
    manifest = (
        b"name: dep\n"
        b"releases:\n"
        b"- name: a\n"
        b"  version: '1'\n"
        b"  url: https://example.com/a.tgz\n"
        b"- name: b\n"
        b"  version: '2'\n"
        b"- name: c\n"
        b"  version: 1+capi\n"
        b"  url: https://example.com/c.tgz\n"
    )

    _, run = _run(record_store, uploader, ui, manifest)

    assert [opts.name for opts in uploader.calls] == ["a", "c"]
    assert str(uploader.calls[1].version) == "1+capi"
    assert run.uploaded_releases == ["a", "c"]
    assert run.skipped_releases == ["b"]


def test_malformed_version_aborts_without_uploads(record_store, uploader, ui) -> None:
    manifest = (
        b"name: dep\n"
        b"releases:\n"
        b"- name: capi\n"
        b"  version: 1+capi+capi\n"
        b"  url: https://example.com/capi.tgz\n"
    )
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)

    with pytest.raises(VersionFormatError) as exc_info:
        orchestrator.run(DeployRequest(manifest=manifest))

    assert "Expected version '1+capi+capi' to match version format" in str(exc_info.value)
    assert uploader.calls == []
    assert record_store.update_calls == []
    assert orchestrator.current_run.history[-2] is PipelineState.CONFIRMED


def test_rejection_means_no_uploads_and_no_update(record_store, uploader) -> None:
    ui = FakeUI(confirm_error=ConfirmationRejectedError("Stopped"))
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)

    with pytest.raises(ConfirmationRejectedError):
        orchestrator.run(DeployRequest(manifest=THREE_RELEASES))

    assert uploader.calls == []
    assert record_store.update_calls == []
    assert orchestrator.current_run.abort_reason == "Stopped"


def test_prompt_failure_is_a_rejection(record_store, uploader) -> None:
    ui = FakeUI(confirm_error=EOFError())

    with pytest.raises(ConfirmationRejectedError):
        _run(record_store, uploader, ui, b"name: dep\n")

    assert record_store.update_calls == []


def test_diff_failure_stops_before_prompt(uploader, ui) -> None:
    store = FakeRecordStore(diff_error=RuntimeError("timeout"))

    with pytest.raises(DiffFetchError):
        _run(store, uploader, ui, b"name: dep\n")

    assert ui.confirmations == 0
    assert store.update_calls == []


def test_second_of_three_uploads_fails(record_store, ui) -> None:
    """The first upload stays done, the third is never tried, no update runs."""
    uploader = FakeUploader(fail_on={"b": RuntimeError("checksum mismatch")})
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)

    with pytest.raises(UploadError):
        orchestrator.run(DeployRequest(manifest=THREE_RELEASES))

    run = orchestrator.current_run
    assert [opts.name for opts in uploader.calls] == ["a", "b"]
    assert run.uploaded_releases == ["a"]
    assert run.state is PipelineState.ABORTED
    assert record_store.update_calls == []


def test_update_failure_is_reported_verbatim(uploader, ui) -> None:
    store = FakeRecordStore(update_error=RuntimeError("Task 42 error"))
    orchestrator = UpdateOrchestrator(store, uploader, ui)

    with pytest.raises(UpdateError) as exc_info:
        orchestrator.run(DeployRequest(manifest=b"name: dep\n"))

    assert str(exc_info.value) == "Updating deployment 'dep': Task 42 error"
    assert len(store.update_calls) == 1
    assert orchestrator.current_run.history[-2] is PipelineState.RELEASES_SYNCED


def test_cancelled_run_stops_before_next_step(record_store, uploader) -> None:
    """Setting the event during confirmation prevents uploads and the update."""
    cancel = threading.Event()

    class CancellingUI(FakeUI):
        def ask_for_confirmation(self):
            super().ask_for_confirmation()
            cancel.set()

    orchestrator = UpdateOrchestrator(record_store, uploader, CancellingUI(), cancel_event=cancel)

    with pytest.raises(PipelineCancelledError):
        orchestrator.run(DeployRequest(manifest=THREE_RELEASES))

    assert uploader.calls == []
    assert record_store.update_calls == []
    assert orchestrator.current_run.state is PipelineState.ABORTED


def test_keyboard_interrupt_aborts_and_propagates(record_store, uploader) -> None:
    ui = FakeUI(confirm_error=KeyboardInterrupt())
    orchestrator = UpdateOrchestrator(record_store, uploader, ui)

    with pytest.raises(KeyboardInterrupt):
        orchestrator.run(DeployRequest(manifest=b"name: dep\n"))

    assert orchestrator.current_run.state is PipelineState.ABORTED
    assert orchestrator.current_run.abort_reason == "Interrupted"
    assert record_store.update_calls == []


def test_pipeline_run_rejects_skipped_states() -> None:
    run = PipelineRun(deployment="dep")

    with pytest.raises(RuntimeError):
        run.advance(PipelineState.DIFFED)

    run.abort("boom")
    run.abort("again")
    assert run.abort_reason == "boom"
    assert run.history == [PipelineState.START, PipelineState.ABORTED]


def test_record_store_name_failure_aborts_the_run(uploader, ui) -> None:
    store = FakeRecordStore(name_error=RuntimeError("director unreachable"))
    orchestrator = UpdateOrchestrator(store, uploader, ui)

    with pytest.raises(RecordStoreError) as exc_info:
        orchestrator.run(DeployRequest(manifest=b"name: dep\n"))

    assert str(exc_info.value) == "Reading deployment name: director unreachable"
    assert orchestrator.current_run.state is PipelineState.ABORTED
    assert store.diff_calls == []
    assert store.update_calls == []
