from pathlib import Path

from pybuildzig.types import LibType


def link_search(out_dir: Path) -> str:
    return f"cargo:rustc-link-search=native={out_dir}"


def link_lib(lib_type: LibType, lib_name: str) -> str:
    return f"cargo:rustc-link-lib={lib_type.cargo_kind}={lib_name}"


def rerun_if_changed(source: str) -> str:
    return f"cargo:rustc-rerun-if-changed={source}"


def directives(
    out_dir: Path, lib_type: LibType, lib_name: str, source: str
) -> tuple[str, str, str]:
    """The lines cargo has to read before zig runs, in the order it reads them."""
    return (
        link_search(out_dir),
        link_lib(lib_type, lib_name),
        rerun_if_changed(source),
    )
