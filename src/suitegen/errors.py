"""Exception types raised while generating a SuiteScript file."""

from __future__ import annotations

__all__ = [
    "GenerationError",
    "MissingFilename",
    "UnknownApiVersion",
    "UnknownModule",
    "UnknownScriptType",
]


class GenerationError(RuntimeError):
    """Base class for failures that abort generation of a script file.

    ``raw`` holds the user supplied value that caused the failure so callers
    can present it back verbatim.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class MissingFilename(GenerationError):
    """Raised when no output file name was supplied."""

    def __init__(self) -> None:
        super().__init__("a file name is required")


class UnknownScriptType(GenerationError):
    """Raised when a script type does not match any known entry point."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"unknown script type '{raw}'", raw)


class UnknownApiVersion(GenerationError):
    """Raised when an API version is not accepted."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"unknown API version '{raw}'", raw)


class UnknownModule(GenerationError):
    """Raised when a module token does not name an ``N/*`` module."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"unknown module '{raw}'", raw)
