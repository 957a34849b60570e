from pathlib import Path
from typing import Protocol
import argparse

from pybuildzig import __version__
from pybuildzig.config import OPTIMIZATIONS


class ArgsConfig(Protocol):
    config: Path | None
    file: Path | None
    lib_name: str | None
    out_dir: Path | None
    lib_type: str | None
    optimization: str | None
    target: str | None
    native_target: bool
    soname: bool | None
    log: str | bool | None
    best_effort_log: bool
    compiler: str | None
    dry_run: bool
    verbose: bool


def args_parse(argv: list[str]) -> tuple[ArgsConfig, list[str]]:
    """Everything after '--' is handed to zig untouched."""
    flags: list[str] = []
    if "--" in argv:
        idx = argv.index("--")
        argv, flags = argv[:idx], argv[idx + 1 :]

    parser = argparse.ArgumentParser(
        prog="pybuildzig",
        description="Builds a zig library from a cargo build script",
        epilog="",
    )
    parser.add_argument("-c", "--config", type=Path, default=None)
    parser.add_argument("-f", "--file", type=Path, default=None)
    parser.add_argument("-n", "--lib-name", default=None)
    parser.add_argument("-o", "--out-dir", type=Path, default=None)
    parser.add_argument("-O", "--optimization", choices=tuple(OPTIMIZATIONS))
    parser.add_argument("--compiler", default=None)
    parser.add_argument("--version", action="version", version=__version__)

    lib_type = parser.add_mutually_exclusive_group()
    lib_type.add_argument(
        "--static", dest="lib_type", action="store_const", const="static"
    )
    lib_type.add_argument(
        "--dynamic", dest="lib_type", action="store_const", const="dynamic"
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument("--target", default=None)
    target.add_argument("--native-target", action="store_true")

    parser.add_argument(
        "--no-soname", dest="soname", action="store_const", const=False, default=None
    )
    parser.add_argument("--log", nargs="?", const=True, default=None)
    parser.add_argument("--best-effort-log", action="store_true")
    parser.add_argument("--dry-run", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser.parse_args(argv), flags  # type: ignore
