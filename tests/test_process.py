import pytest

from pybuildzig import process
from pybuildzig.process import exec_command


def test_posix_replaces_process(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(process, "POSIX", True)
    monkeypatch.setattr(process.os, "execvp", lambda file, args: calls.append((file, args)))

    exec_command(("zig", "build-lib", "main.zig"))

    assert calls == [("zig", ("zig", "build-lib", "main.zig"))]


def test_without_exec_forwards_exit_status(monkeypatch) -> None:
    class Completed:
        returncode = 3

    monkeypatch.setattr(process, "POSIX", False)
    monkeypatch.setattr(process.subprocess, "run", lambda cmd: Completed())

    with pytest.raises(SystemExit) as exc:
        exec_command(("zig", "build-lib", "main.zig"))
    assert exc.value.code == 3


def test_missing_compiler_is_annotated(monkeypatch) -> None:
    def execvp(file, args):
        raise FileNotFoundError(2, "No such file or directory", file)

    monkeypatch.setattr(process, "POSIX", True)
    monkeypatch.setattr(process.os, "execvp", execvp)

    with pytest.raises(FileNotFoundError) as exc:
        exec_command(("zig-does-not-exist", "build-lib"))
    assert "Command 'zig-does-not-exist' not found!" in exc.value.__notes__
