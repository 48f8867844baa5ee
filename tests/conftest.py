"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
import typing

import pytest

from outcomes import EventChannel


@dataclass(eq=False)
class Recorder:
    """Listener test double capturing every payload it receives."""

    calls: list[typing.Any] = field(default_factory=list)

    def __call__(self, payload: typing.Any) -> None:
        self.calls.append(payload)


@pytest.fixture
def channel() -> EventChannel[typing.Any]:
    return EventChannel()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
