from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, TextIO
import os
import shlex
import sys

from pybuildzig.cargo import directives
from pybuildzig.compiler import ZigCommand, build_lib
from pybuildzig.context import HostContext
from pybuildzig.errors import MissingSourceError, SourceNotFoundError
from pybuildzig.log import BuildLog
from pybuildzig.process import exec_command
from pybuildzig.resolve import (
    resolve_lib_name,
    resolve_mode,
    resolve_out_dir,
    resolve_target,
)
from pybuildzig.types import Cmd, LibType, Opt

LOG_FILE_NAME = "logs.txt"


@dataclass(frozen=True)
class ResolvedBuild:
    """A build with every host fact looked up, ready to be turned into a command."""

    cc: str
    source: str
    lib_name: str
    out_dir: Path
    lib_type: LibType
    target: str | None
    mode: str
    soname: bool
    flags: tuple[str, ...]
    log_path: Path | None
    log_strict: bool


@dataclass(frozen=True)
class Build:
    """Describes one zig library to build from a cargo build script.

    Every setter returns a new ``Build``, so calls chain::

        Build().file("src/main.zig").as_static().finish()

    Nothing is checked until ``finish``.
    """

    source: str | os.PathLike | None = None
    name: str | None = None
    extra_flags: tuple[str, ...] = ()
    output_dir: Path | None = None
    lib_type: LibType = LibType.DYNAMIC
    opt: Opt | str | None = None
    target_from_host: bool = True
    target_triple: str | None = None
    use_soname: bool = True
    log_enabled: bool = False
    log_path: Path | None = None
    log_strict: bool = True
    cc: str = "zig"
    is_verbose: bool = False

    def file(self, path: str | os.PathLike) -> "Build":
        return replace(self, source=path)

    def lib_name(self, name: str) -> "Build":
        return replace(self, name=str(name))

    def flags(self, flags: Iterable[str]) -> "Build":
        return replace(self, extra_flags=(*self.extra_flags, *map(str, flags)))

    def out_dir(self, path: str | os.PathLike) -> "Build":
        return replace(self, output_dir=Path(path))

    def as_static(self) -> "Build":
        return replace(self, lib_type=LibType.STATIC)

    def as_dynlib(self) -> "Build":
        return replace(self, lib_type=LibType.DYNAMIC)

    def optimization(self, opt: Opt | str) -> "Build":
        """Configure the optimization level of the library.

        Without it a ``debug`` profile builds ``Debug`` and a ``release``
        profile builds ``ReleaseSafe``.
        """
        return replace(self, opt=opt)

    def target(self, triple: str) -> "Build":
        """Pass ``triple`` to zig as is."""
        return replace(self, target_from_host=False, target_triple=triple)

    def host_target(self) -> "Build":
        """Derive the zig triple from cargo's TARGET (the default)."""
        return replace(self, target_from_host=True, target_triple=None)

    def native_target(self) -> "Build":
        """Leave the target to zig."""
        return replace(self, target_from_host=False, target_triple=None)

    def soname(self, enabled: bool) -> "Build":
        return replace(self, use_soname=enabled)

    def log(
        self, enabled: bool, path: str | os.PathLike | None = None, strict: bool = True
    ) -> "Build":
        return replace(
            self,
            log_enabled=enabled,
            log_path=Path(path) if path is not None else None,
            log_strict=strict,
        )

    def compiler(self, cc: str) -> "Build":
        return replace(self, cc=cc)

    def verbose(self, verbose: bool) -> "Build":
        return replace(self, is_verbose=verbose)

    def resolve(self, host: HostContext) -> ResolvedBuild:
        if self.source is None:
            raise MissingSourceError()
        out_dir = resolve_out_dir(self.output_dir, host)
        return ResolvedBuild(
            cc=self.cc,
            source=os.fspath(self.source),
            lib_name=resolve_lib_name(self.name, self.source),
            out_dir=out_dir,
            lib_type=self.lib_type,
            target=resolve_target(host) if self.target_from_host else self.target_triple,
            mode=resolve_mode(self.opt, host),
            soname=self.use_soname,
            flags=self.extra_flags,
            log_path=(self.log_path or out_dir / LOG_FILE_NAME)
            if self.log_enabled
            else None,
            log_strict=self.log_strict,
        )

    def command(self, host: HostContext) -> ZigCommand:
        return build_lib()(self.resolve(host))

    def finish(
        self,
        host: HostContext | None = None,
        execute: Callable[[Cmd], Any] = exec_command,
        out: TextIO | None = None,
    ) -> None:
        """Tells cargo how to link the library, then becomes the zig compiler.

        Returns without doing anything if no file was set. With the default
        ``execute`` this does not return once zig has been started.
        """
        if self.source is None:
            return None

        if not Path(self.source).is_file():
            raise SourceNotFoundError(Path(self.source))

        host = host if host is not None else HostContext.from_env()
        out = out if out is not None else sys.stdout
        resolved = self.resolve(host)

        with BuildLog(resolved.log_path, resolved.log_strict) as log:
            for line in directives(
                resolved.out_dir, resolved.lib_type, resolved.lib_name, resolved.source
            ):
                print(line, file=out)
                log.write(line)

        cmd = build_lib()(resolved)
        if self.is_verbose:
            print(f"[pybuildzig] {shlex.join(cmd.command)}", file=sys.stderr)
        out.flush()
        execute(cmd.command)
