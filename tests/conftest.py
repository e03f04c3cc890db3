"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pytest


def pytest_configure(config):
    """Configure pytest."""
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))

    for marker in ("solver", "surface", "glyphs"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        nodeid = item.nodeid.lower()
        if "test_solver" in nodeid or "test_line" in nodeid:
            item.add_marker("solver")
        if "test_surface" in nodeid:
            item.add_marker("surface")
        if "test_glyphs" in nodeid:
            item.add_marker("glyphs")


class FakeDevice:
    """
    In-memory TerminalDevice.

    Args:
        redirected: Report output as redirected (buffered mode)
        size: Largest (width, height) the device can show
        fail_writes: Raise OSError from write_raw
    """

    def __init__(
        self,
        redirected: bool = True,
        size: Tuple[int, int] = (200, 200),
        fail_writes: bool = False,
    ):
        self.is_output_redirected = redirected
        self.size = size
        self.fail_writes = fail_writes
        self.cursor: Optional[Tuple[int, int]] = None
        self.cursor_moves: List[Tuple[int, int]] = []
        self.writes: List[Tuple[Optional[Tuple[int, int]], str]] = []
        self.cleared = 0

    def can_resize(self, width: int, height: int) -> bool:
        return width <= self.size[0] and height <= self.size[1]

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)
        self.cursor_moves.append((x, y))

    def clear_screen(self) -> None:
        self.cleared += 1

    def write_raw(self, text: str) -> None:
        if self.fail_writes:
            raise OSError("device gone")
        self.writes.append((self.cursor, text))

    @property
    def output(self) -> str:
        return "".join(text for _, text in self.writes)


class CountingWaiter:
    """Waiter that only counts how often it was waited on."""

    def __init__(self):
        self.count = 0

    def wait(self) -> None:
        self.count += 1


@pytest.fixture
def device() -> FakeDevice:
    return FakeDevice()


@pytest.fixture
def screen_device() -> FakeDevice:
    return FakeDevice(redirected=False)


@pytest.fixture
def counting_waiter() -> CountingWaiter:
    return CountingWaiter()
