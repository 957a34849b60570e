from pathlib import Path

import pytest

from pybuildzig import Build, HostContext, LibType, Opt
from pybuildzig.compiler import build_lib


def test_dynamic_release_command(host: HostContext, source: Path) -> None:
    cmd = Build().file(source).command(host)

    assert cmd.output_path == host.out_dir / "libmain.so"
    assert cmd.command == (
        "zig",
        "build-lib",
        "-dynamic",
        f"-femit-bin={host.out_dir}/libmain.so",
        "-fsoname=libmain.so",
        "--cache-dir",
        str(host.out_dir),
        "-target",
        "x86_64-linux-gnu",
        "-O",
        "ReleaseSafe",
        str(source),
    )


def test_static_uses_archive_suffix_everywhere(host: HostContext, source: Path) -> None:
    cmd = Build().file(source).as_static().command(host).command

    assert cmd[2] == "-static"
    assert cmd[3] == f"-femit-bin={host.out_dir}/libmain.a"
    assert cmd[4] == "-fsoname=libmain.a"


@pytest.mark.parametrize("lib_type", list(LibType))
def test_emit_path_only_differs_in_suffix(
    host: HostContext, source: Path, lib_type: LibType
) -> None:
    build = Build().file(source).lib_name("core")
    build = build.as_static() if lib_type is LibType.STATIC else build.as_dynlib()
    output_path = build.command(host).output_path

    assert output_path == Path(f"{host.out_dir}/libcore.{lib_type.suffix}")


def test_lib_name_with_dots_keeps_them(host: HostContext, source: Path) -> None:
    cmd = Build().file(source).lib_name("foo.bar").command(host)
    assert cmd.output_path.name == "libfoo.bar.so"


def test_soname_can_be_dropped(host: HostContext, source: Path) -> None:
    cmd = Build().file(source).soname(False).command(host).command
    assert not any(arg.startswith("-fsoname") for arg in cmd)


def test_native_target_omits_target_flag(source: Path, tmp_path: Path) -> None:
    # no TARGET needed when zig picks the target
    host = HostContext(out_dir=tmp_path, profile="debug")
    cmd = Build().file(source).native_target().command(host).command

    assert "-target" not in cmd
    assert cmd[cmd.index("-O") + 1] == "Debug"


def test_explicit_target_is_passed_through(source: Path, tmp_path: Path) -> None:
    host = HostContext(out_dir=tmp_path, profile="debug")
    cmd = Build().file(source).target("wasm32-freestanding").command(host).command
    assert cmd[cmd.index("-target") + 1] == "wasm32-freestanding"


def test_host_target_restores_derivation(host: HostContext, source: Path) -> None:
    cmd = Build().file(source).native_target().host_target().command(host).command
    assert cmd[cmd.index("-target") + 1] == "x86_64-linux-gnu"


def test_flags_come_before_source_in_order(host: HostContext, source: Path) -> None:
    cmd = (
        Build()
        .file(source)
        .flags(["-lc", "-fPIC"])
        .flags(("-lc",))
        .optimization(Opt.SMALL)
        .command(host)
        .command
    )

    assert cmd[-4:] == ("-lc", "-fPIC", "-lc", str(source))
    assert cmd[cmd.index("-O") + 1] == "ReleaseSmall"


def test_compiler_can_be_overridden(host: HostContext, source: Path) -> None:
    assert Build().file(source).compiler("zig-0.11").command(host).command[0] == "zig-0.11"


def test_build_lib_reads_resolved_build(host: HostContext, source: Path) -> None:
    resolved = Build().file(source).out_dir("/elsewhere").resolve(host)
    cmd = build_lib()(resolved)

    assert cmd.source == str(source)
    assert cmd.command[cmd.command.index("--cache-dir") + 1] == "/elsewhere"
