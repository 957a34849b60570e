from pathlib import Path
from typing import Any, TypedDict

import toml

from returns.io import IOResultE, impure_safe
from returns.result import safe

from pybuildzig.build import Build
from pybuildzig.errors import ConfigError
from pybuildzig.types import LibType, Opt

OPTIMIZATIONS = {
    "fast": Opt.FAST,
    "safe": Opt.SAFE,
    "small": Opt.SMALL,
}

LIB_TYPES = {
    "static": LibType.STATIC,
    "dynamic": LibType.DYNAMIC,
}


class BuildConfig(TypedDict, total=False):
    file: str
    lib_name: str
    out_dir: str
    type: str
    optimization: str
    target: str
    soname: bool
    flags: list[str]
    log: bool
    log_file: str
    log_strict: bool
    compiler: str


@impure_safe
def load_config_file(config_path: Path) -> dict[str, Any]:
    dic = toml.loads(config_path.read_text())
    dic["project_dir"] = config_path.parent
    return dic


def _lookup(table: dict, key: str, value: str):
    try:
        return table[value]
    except KeyError:
        raise ConfigError(
            f"'{key}' must be one of {', '.join(table)}, not '{value}'"
        ) from None


@safe
def parse_config(project_dir: Path, config: BuildConfig) -> Build:
    build = Build()

    if "file" in config:
        build = build.file(Path(project_dir, config["file"]))
    if "lib_name" in config:
        build = build.lib_name(config["lib_name"])
    if "out_dir" in config:
        build = build.out_dir(Path(project_dir, config["out_dir"]))
    if "type" in config:
        build = (
            build.as_static()
            if _lookup(LIB_TYPES, "type", config["type"]) is LibType.STATIC
            else build.as_dynlib()
        )
    if "optimization" in config:
        build = build.optimization(
            _lookup(OPTIMIZATIONS, "optimization", config["optimization"])
        )

    match config.get("target", "host"):
        case "host":
            build = build.host_target()
        case "native":
            build = build.native_target()
        case triple:
            build = build.target(triple)

    if "compiler" in config:
        build = build.compiler(config["compiler"])

    return (
        build.soname(config.get("soname", True))
        .flags(config.get("flags", ()))
        .log(
            config.get("log", False),
            Path(project_dir, config["log_file"]) if "log_file" in config else None,
            strict=config.get("log_strict", True),
        )
    )


def load_config(config_path: Path) -> IOResultE[Build]:
    """Reads the [build] table of a pybuildzig.toml into a Build."""
    return load_config_file(config_path).bind_result(
        lambda config: parse_config(config["project_dir"], config.get("build", {}))
    )
