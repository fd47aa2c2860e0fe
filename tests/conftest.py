"""Pytest fixtures for clocktui tests."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="clocktui-tests-"))
os.environ["CLOCKTUI_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["CLOCKTUI_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


class FakeClock:
    """Settable stand-in for ``local_now``."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class RecordingActivity:
    """Activity sink that remembers every notification."""

    def __init__(self) -> None:
        self.calls: list[bool] = []

    def notify_activity(self, active: bool) -> None:
        self.calls.append(active)


@pytest.fixture
def ten_oclock() -> datetime:
    return datetime(2024, 5, 17, 10, 0, 0)


@pytest.fixture
def fake_clock(ten_oclock: datetime) -> FakeClock:
    return FakeClock(ten_oclock)


@pytest.fixture
def activity() -> RecordingActivity:
    return RecordingActivity()


@pytest.fixture
def config_path() -> Generator[Path, None, None]:
    """Config file location inside the per-session temp tree, removed afterwards."""
    path = Path(os.environ["CLOCKTUI_CONFIG_DIR"]) / "config.toml"
    path.unlink(missing_ok=True)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture(autouse=True)
def _reset_debug_log() -> Generator[None, None, None]:
    from clocktui.debug_log import clear_log_buffer, teardown_debug_logging

    clear_log_buffer()
    yield
    teardown_debug_logging()
    clear_log_buffer()
