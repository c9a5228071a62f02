from __future__ import annotations

import logging

import pytest

from indexsmith.core.diagnostics import LoggingEmitter, NullEmitter, format_event_message
from indexsmith.core.exceptions import TemplateNotFoundError
from indexsmith.ui.cli.diagnostics import CliEmitter
from indexsmith.ui.cli.state import set_cli_state


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.WARNING):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.INFO):
        emitter.error("boom")
        emitter.event("template_loaded", {"path": "/client/index.html"})
    messages = [record.getMessage() for record in caplog.records]
    assert "boom" in messages
    assert "Loaded base template: /client/index.html" in messages
    assert emitter.debug_enabled is True


def test_format_event_message() -> None:
    assert format_event_message(
        "fragment_merged", {"path": "/theme/index.html", "head": True, "body": True}
    ) == "Merged fragment: /theme/index.html (head, body)"
    assert format_event_message("fragment_merged", {"path": "/x"}) == "Merged fragment: /x (empty)"
    assert format_event_message("unknown", {}) is None


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("fragment_merged", {"path": "/theme/index.html", "head": True})

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined_output
    assert "Boom" in combined_output
    assert "Merged fragment" in captured.err


def test_template_not_found_message(tmp_path) -> None:
    error = TemplateNotFoundError(tmp_path / "index.html", reason="Permission denied")

    assert str(error) == f"Base template not found: {tmp_path / 'index.html'} (Permission denied)"
