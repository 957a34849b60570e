"""Errors raised while turning a build description into a zig invocation.

Every error here aborts the build step. Nothing is retried.
"""

from pathlib import Path


class BuildError(Exception):
    """Base class of all pybuildzig errors."""


class MissingEnvironmentError(BuildError):
    def __init__(self, variable: str, purpose: str):
        super().__init__(f"{variable} to be set by cargo ({purpose})")
        self.variable = variable
        self.purpose = purpose


class MissingSourceError(BuildError):
    def __init__(self):
        super().__init__("no source file set, cannot derive a library name")


class SourceNotFoundError(BuildError):
    def __init__(self, path: Path):
        super().__init__(f"Expected file to link to: '{path}'")
        self.path = path


class TargetTripleError(BuildError):
    def __init__(self, triple: str):
        super().__init__(
            f"TARGET '{triple}' is not of the form <arch>-<vendor>-<os>-<abi>"
        )
        self.triple = triple


class ProfileError(BuildError):
    def __init__(self, profile: str):
        super().__init__(f"Invalid cargo PROFILE '{profile}'")
        self.profile = profile


class ConfigError(BuildError):
    pass


class LogFileError(BuildError):
    pass
