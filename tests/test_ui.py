"""Tests for the rich console UI."""

import io

import pytest
from rich.console import Console

from deploy_pipeline.cli.utils.ui import RichUI
from deploy_pipeline.exceptions import ConfirmationRejectedError


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=120)


def test_say_prints_verbatim() -> None:
    """Markup-like text and terminators are kept as given."""
    console = _console()
    ui = RichUI(console=console)

    ui.say("+ name: [bold]dep[/bold]\n")
    ui.say("  other\n")

    assert console.file.getvalue() == "+ name: [bold]dep[/bold]\n  other\n"


def test_non_interactive_confirms_without_prompt(monkeypatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("prompted")

    monkeypatch.setattr("deploy_pipeline.cli.utils.ui.Confirm.ask", fail)

    RichUI(console=_console(), non_interactive=True).ask_for_confirmation()


def test_declining_raises(monkeypatch) -> None:
    monkeypatch.setattr("deploy_pipeline.cli.utils.ui.Confirm.ask", lambda *args, **kwargs: False)

    with pytest.raises(ConfirmationRejectedError):
        RichUI(console=_console()).ask_for_confirmation()


def test_accepting_returns(monkeypatch) -> None:
    monkeypatch.setattr("deploy_pipeline.cli.utils.ui.Confirm.ask", lambda *args, **kwargs: True)

    RichUI(console=_console()).ask_for_confirmation()
