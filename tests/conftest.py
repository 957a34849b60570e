"""Shared test fixtures."""

from pathlib import Path

import pytest

from pybuildzig import HostContext


@pytest.fixture
def host(tmp_path: Path) -> HostContext:
    """What cargo would export for a release build on x86_64 linux."""
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    return HostContext(
        out_dir=out_dir,
        target="x86_64-unknown-linux-gnu",
        profile="release",
    )


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "src" / "main.zig"
    path.parent.mkdir()
    path.write_text("export fn add(a: i32, b: i32) i32 { return a + b; }\n")
    return path


class Recorder:
    def __init__(self):
        self.commands: list[tuple[str, ...]] = []

    def __call__(self, cmd):
        self.commands.append(cmd)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
