"""Exceptions raised by import-inspector."""

from typing import Iterable


class InspectorError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigurationError(InspectorError):
    """A configuration value from the environment or command line is invalid."""


class ScannerUnavailableError(InspectorError):
    """No scanner provider could be constructed."""

    def __init__(self, hints: Iterable[str] = ()) -> None:
        self.hints = list(hints)
        message = "No usable file scanner module found; exiting..."
        if self.hints:
            message += "\nInstall one of:\n" + "\n".join(f"  {h}" for h in self.hints)
        super().__init__(message)


class ClassifierUnavailableError(InspectorError):
    """The core module classifier's backing library is not installed."""


class FileUnreadableError(InspectorError):
    """An input path is not a readable file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to open file '{path}' for reading")


class ScanFailureError(InspectorError):
    """A scanner raised while analysing one file."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to scan file '{path}': {cause}")
