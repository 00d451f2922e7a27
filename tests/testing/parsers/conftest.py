"""Shared fixtures for parser tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from testplane.testing.models import ProcessOutcome

OutcomeFactory = Callable[..., ProcessOutcome]


@pytest.fixture
def make_outcome() -> OutcomeFactory:
    """Build a ProcessOutcome the way the runner would report it."""

    def factory(
        stdout: str = "",
        stderr: str = "",
        exit_code: int | None = 0,
        *,
        duration_ms: float = 100.0,
        timed_out: bool = False,
        truncated: bool = False,
    ) -> ProcessOutcome:
        return ProcessOutcome(
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            duration_ms=duration_ms,
            timed_out=timed_out,
            stdout_truncated=truncated,
        )

    return factory
