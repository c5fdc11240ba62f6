"""Mini README: Shared fixtures for the Gig Ledger test-suite.

Structure:
    * make_recorder - factory for listeners remembering every sequence they saw.
    * exploding_listener - listener whose update always raises.
    * settings / session - fresh configuration and tracker session per test.
"""

from __future__ import annotations

import os
from typing import Callable, List, Optional, Sequence

import pytest

from gigledger.broadcasting import LedgerListener
from gigledger.configuration import GigLedgerSettings, get_settings
from gigledger.session import TrackerSession


class RecordingListener(LedgerListener):
    """Capture the sequences delivered by the broadcaster."""

    def __init__(self, name: str = "recorder", calls: Optional[List[str]] = None) -> None:
        self.listener_name = name
        self.received: List[Sequence] = []
        self._calls = calls

    def update(self, transactions: Sequence) -> None:
        self.received.append(transactions)
        if self._calls is not None:
            self._calls.append(self.listener_name)


class ExplodingListener(LedgerListener):
    """Listener that always fails."""

    listener_name = "exploding"

    def update(self, transactions: Sequence) -> None:
        raise RuntimeError("render failed")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.upper().startswith("GIGLEDGER_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_recorder() -> Callable[..., RecordingListener]:
    return RecordingListener


@pytest.fixture
def exploding_listener() -> ExplodingListener:
    return ExplodingListener()


@pytest.fixture
def settings() -> GigLedgerSettings:
    return GigLedgerSettings()


@pytest.fixture
def session(settings: GigLedgerSettings) -> TrackerSession:
    return TrackerSession(settings)
