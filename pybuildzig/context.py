from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
import os


@dataclass(frozen=True)
class HostContext:
    """The facts cargo hands a build script through its environment."""

    out_dir: Path | None = None
    target: str | None = None
    profile: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "HostContext":
        out_dir = environ.get("OUT_DIR")
        return cls(
            out_dir=Path(out_dir) if out_dir else None,
            target=environ.get("TARGET"),
            profile=environ.get("PROFILE"),
        )
