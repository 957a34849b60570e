from pathlib import Path

from pybuildzig.context import HostContext
from pybuildzig.errors import (
    ConfigError,
    MissingEnvironmentError,
    MissingSourceError,
    ProfileError,
    TargetTripleError,
)
from pybuildzig.types import DEBUG_MODE, Opt


def resolve_lib_name(lib_name: str | None, source: Path | None) -> str:
    """Explicit name, or everything before the first '.' of the file name."""
    if lib_name is not None:
        return str(lib_name)
    if source is None:
        raise MissingSourceError()
    return Path(source).name.split(".")[0]


def resolve_out_dir(out_dir: Path | None, host: HostContext) -> Path:
    if out_dir is not None:
        return Path(out_dir)
    if host.out_dir is None:
        raise MissingEnvironmentError("OUT_DIR", "output directory")
    return host.out_dir


def emit_path(out_dir: Path, lib_name: str) -> Path:
    return out_dir / f"lib{lib_name}"


def resolve_target(host: HostContext) -> str:
    """Drops the vendor of cargo's triple, zig has no notion of it.

    x86_64-unknown-linux-gnu -> x86_64-linux-gnu
    """
    if host.target is None:
        raise MissingEnvironmentError("TARGET", "target triple")
    match host.target.split("-"):
        case [arch, _vendor, system, abi]:
            return f"{arch}-{system}-{abi}"
        case _:
            raise TargetTripleError(host.target)


def _optimization(opt: Opt | str) -> Opt:
    """Accepts an Opt, its zig spelling or its lowercase name."""
    for member in Opt:
        if opt in (member, member.value, member.name.lower()):
            return member
    raise ConfigError(
        f"Invalid optimization '{opt}', expected one of "
        f"{', '.join(member.name.lower() for member in Opt)}"
    )


def resolve_mode(opt: Opt | str | None, host: HostContext) -> str:
    if opt is not None:
        return str(_optimization(opt))

    match host.profile:
        case None:
            raise MissingEnvironmentError("PROFILE", "build profile")
        case "release":
            return str(Opt.SAFE)
        case "debug":
            return DEBUG_MODE
        case profile:
            raise ProfileError(profile)
