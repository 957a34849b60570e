from enum import Enum, StrEnum

Cmd = tuple[str, ...]

DEBUG_MODE = "Debug"


class Opt(StrEnum):
    """Optimization level of the library, as zig spells it."""

    FAST = "ReleaseFast"
    SAFE = "ReleaseSafe"
    SMALL = "ReleaseSmall"


class LibType(Enum):
    # (zig emit flag, file suffix, cargo link kind)
    STATIC = ("-static", "a", "static")
    DYNAMIC = ("-dynamic", "so", "dylib")

    def __init__(self, zig_flag: str, suffix: str, cargo_kind: str):
        self.zig_flag = zig_flag
        self.suffix = suffix
        self.cargo_kind = cargo_kind
