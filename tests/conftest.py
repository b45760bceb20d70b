"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from termlink.api.platform.EnvironmentSnapshot import EnvironmentSnapshot
from termlink.api.platform.PlatformContext import PlatformContext
from termlink.api.platform.PlatformFamily import PlatformFamily


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "smoke: end-to-end CLI checks")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Host collaborator fakes
# =============================================================================


class FakeExistenceCheck:
    """Existence check backed by a fixed set of paths."""

    def __init__(self, existing: set[str] | None = None, error: Exception | None = None):
        self.existing = set(existing or ())
        self.error = error
        self.calls: list[str] = []

    async def exists(self, path: str) -> bool:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return path in self.existing


class FakeEditorHost:
    def __init__(self, error: Exception | None = None):
        self.opened: list[str] = []
        self.error = error

    async def open_path(self, path: str) -> None:
        if self.error is not None:
            raise self.error
        self.opened.append(path)


class FakeTooltipSurface:
    def __init__(self):
        self.shown: list[tuple[int, int, str]] = []
        self.closed = 0

    def show_message(self, x: int, y: int, text: str) -> None:
        self.shown.append((x, y, text))

    def close_message(self) -> None:
        self.closed += 1


class FakeElement:
    """DOM-like element that records listeners and can fire them."""

    def __init__(self, offset_left: int = 10, offset_top: int = 20):
        self.offset_left = offset_left
        self.offset_top = offset_top
        self.listeners: dict[str, list[Callable[[], None]]] = {}

    def add_event_listener(self, event_name: str, listener: Callable[[], None]) -> None:
        self.listeners.setdefault(event_name, []).append(listener)

    def fire(self, event_name: str) -> None:
        for listener in self.listeners.get(event_name, []):
            listener()


class ManualTimer:
    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """``call_later`` replacement whose timers only fire on ``advance()``."""

    def __init__(self):
        self.timers: list[ManualTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self) -> None:
        for timer in self.pending:
            timer.fired = True
            timer.callback()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def termlink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point TERMLINK_HOME at an empty temporary directory."""
    home = tmp_path / ".termlink"
    home.mkdir()
    monkeypatch.setenv("TERMLINK_HOME", str(home))
    return home


@pytest.fixture
def posix_context() -> PlatformContext:
    return PlatformContext(
        family=PlatformFamily.LINUX,
        workspace_root="/home/u/project",
        environment=EnvironmentSnapshot({"HOME": "/home/u"}),
    )


@pytest.fixture
def mac_context() -> PlatformContext:
    return PlatformContext(
        family=PlatformFamily.MAC,
        workspace_root="/Users/u/project",
        environment=EnvironmentSnapshot({"HOME": "/Users/u"}),
    )


@pytest.fixture
def windows_context() -> PlatformContext:
    return PlatformContext(
        family=PlatformFamily.WINDOWS,
        workspace_root="C:\\proj",
        environment=EnvironmentSnapshot({"HOMEDRIVE": "C:", "HOMEPATH": "\\Users\\u"}),
    )


@pytest.fixture
def element() -> FakeElement:
    return FakeElement()


@pytest.fixture
def tooltip_surface() -> FakeTooltipSurface:
    return FakeTooltipSurface()


@pytest.fixture
def editor_host() -> FakeEditorHost:
    return FakeEditorHost()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
