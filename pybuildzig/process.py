import os
import subprocess
import sys
from typing import NoReturn

from pybuildzig.types import Cmd

POSIX = os.name == "posix"


def exec_command(cmd: Cmd) -> NoReturn:
    """Hands the build step over to ``cmd``.

    On POSIX the process image is replaced, so cargo sees zig's own output and
    exit status. Elsewhere the child is waited on and its status is forwarded.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        if POSIX:
            os.execvp(cmd[0], cmd)
        else:
            sys.exit(subprocess.run(cmd).returncode)
    except FileNotFoundError as e:
        e.add_note(f"Command '{cmd[0]}' not found!")
        raise
