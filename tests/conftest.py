"""
Shared fixtures for the chatty tests.

Each test gets its own Emitter with an isolated Config, so nothing leaks
through the shared package-level logger. Tests that do exercise the shared
logger go through `shared_logger`, which resets it from an empty environment.
"""

from typing import Callable, List

import pytest

from chatty import Config, Emitter, OutputFormat, Severity, init
from chatty.bootstrap import FORMAT_ENV, SEVERITY_ENV


class ExitRecorder:
    """Stands in for sys.exit so fatal calls can be asserted on."""

    def __init__(self) -> None:
        self.calls: List[int] = []

    def __call__(self, status: int) -> None:
        self.calls.append(status)


@pytest.fixture()
def exits() -> ExitRecorder:
    return ExitRecorder()


@pytest.fixture()
def make_emitter(exits: ExitRecorder) -> Callable[..., Emitter]:
    def _make(
        severity: Severity = Severity.DEBUG,
        output_format: OutputFormat = OutputFormat.PLAIN,
        escape_json: bool = False,
    ) -> Emitter:
        cfg = Config(severity=severity, output_format=output_format, escape_json=escape_json)
        return Emitter(cfg, terminate=exits)

    return _make


@pytest.fixture()
def shared_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(SEVERITY_ENV, raising=False)
    monkeypatch.delenv(FORMAT_ENV, raising=False)
    init(environ={})
    yield
    init(environ={})
