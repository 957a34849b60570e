from pathlib import Path
import shlex
import sys

from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pybuildzig.args import ArgsConfig, args_parse
from pybuildzig.build import Build
from pybuildzig.config import LIB_TYPES, OPTIMIZATIONS, load_config
from pybuildzig.errors import BuildError, ConfigError
from pybuildzig.types import Cmd, LibType


def _load_build(config: Path | None) -> Build:
    if config is None:
        return Build()
    result = load_config(config)
    if not is_successful(result):
        error = unsafe_perform_io(result.failure())
        if isinstance(error, BuildError):
            raise error
        raise ConfigError(f"could not load '{config}': {error}") from error
    return unsafe_perform_io(result.unwrap())


def _apply_args(build: Build, args: ArgsConfig, flags: list[str]) -> Build:
    if args.file:
        build = build.file(args.file)
    if args.lib_name:
        build = build.lib_name(args.lib_name)
    if args.out_dir:
        build = build.out_dir(args.out_dir)
    if args.lib_type:
        build = (
            build.as_static()
            if LIB_TYPES[args.lib_type] is LibType.STATIC
            else build.as_dynlib()
        )
    if args.optimization:
        build = build.optimization(OPTIMIZATIONS[args.optimization])
    if args.target:
        build = build.target(args.target)
    if args.native_target:
        build = build.native_target()
    if args.soname is not None:
        build = build.soname(args.soname)
    if args.compiler:
        build = build.compiler(args.compiler)
    if args.log is not None:
        build = build.log(
            True,
            build.log_path if args.log is True else args.log,
            strict=build.log_strict,
        )
    if args.best_effort_log:
        build = build.log(build.log_enabled, build.log_path, strict=False)
    return build.flags(flags).verbose(args.verbose or build.is_verbose)


def _print_command(cmd: Cmd) -> None:
    print(f"[pybuildzig] {shlex.join(cmd)}", file=sys.stderr)


def pybuildzig(args: ArgsConfig, flags: list[str]) -> None:
    build = _apply_args(_load_build(args.config), args, flags)
    if args.dry_run:
        build.finish(execute=_print_command)
    else:
        build.finish()


def main():
    args, flags = args_parse(sys.argv[1:])
    try:
        pybuildzig(args, flags)
    except BuildError as e:
        print(f"[pybuildzig] Error: {e}", file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError as e:
        print(f"[pybuildzig] Error: {e}", file=sys.stderr)
        for note in getattr(e, "__notes__", ()):
            print(f"[pybuildzig] {note}", file=sys.stderr)
        sys.exit(1)
