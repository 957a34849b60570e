from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from returns.context import RequiresContext

from pybuildzig.resolve import emit_path
from pybuildzig.types import Cmd, LibType


@dataclass()
class ZigCommand:
    """The Return value type of the build_lib function"""

    source: str
    output_path: Path
    command: Cmd


class _CompilerConfig(Protocol):
    cc: str
    source: str
    lib_name: str
    out_dir: Path
    lib_type: LibType
    target: str | None
    mode: str
    soname: bool
    flags: tuple[str, ...]


def _output_path() -> RequiresContext[Path, _CompilerConfig]:
    return RequiresContext(
        lambda config: Path(
            f"{emit_path(config.out_dir, config.lib_name)}.{config.lib_type.suffix}"
        )
    )


def _soname_flags(config: _CompilerConfig) -> Cmd:
    if not config.soname:
        return ()
    return (f"-fsoname=lib{config.lib_name}.{config.lib_type.suffix}",)


def _target_flags(config: _CompilerConfig) -> Cmd:
    # zig validates the triple, not us
    return ("-target", config.target) if config.target else ()


def build_lib() -> RequiresContext[ZigCommand, _CompilerConfig]:
    """Assembles the 'zig build-lib' invocation for the resolved build."""

    def _inner_build_lib(config: _CompilerConfig):
        return _output_path().map(
            lambda output_path: ZigCommand(
                source=config.source,
                output_path=output_path,
                command=(
                    config.cc,
                    "build-lib",
                    config.lib_type.zig_flag,
                    f"-femit-bin={output_path}",
                    *_soname_flags(config),
                    "--cache-dir",
                    str(config.out_dir),
                    *_target_flags(config),
                    "-O",
                    config.mode,
                    *config.flags,
                    config.source,
                ),
            )
        )

    return RequiresContext[ZigCommand, _CompilerConfig].ask().bind(_inner_build_lib)
