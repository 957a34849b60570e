from datetime import datetime
from pathlib import Path
import sys

from pybuildzig.errors import LogFileError

SEPARATOR = "-" * 38


class BuildLog:
    """Append-only diagnostic log, mirroring what is told to cargo.

    With ``strict`` any I/O failure aborts the build, otherwise a warning is
    printed and the build carries on without the log.
    """

    def __init__(self, path: Path | None, strict: bool = True):
        self.path = path
        self.strict = strict
        self._file = None

    def __enter__(self):
        if self.path is None:
            return self
        try:
            self._file = self.path.open("a", encoding="utf-8")
        except OSError as e:
            self._fail(e)
            return self
        self.write("")
        self.write(SEPARATOR)
        self.write(f"T:{datetime.now().astimezone()}")
        self.write(SEPARATOR)
        self.write("")
        return self

    def __exit__(self, *_):
        if self._file is not None:
            self._file.close()
            self._file = None

    def write(self, line: str) -> None:
        if self._file is None:
            return
        try:
            self._file.write(f"{line}\n")
        except OSError as e:
            self._fail(e)

    def _fail(self, error: OSError) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        if self.strict:
            raise LogFileError(f"log file '{self.path}': {error}") from error
        print(
            f"[pybuildzig] warning: not logging to '{self.path}': {error}",
            file=sys.stderr,
        )
