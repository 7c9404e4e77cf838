"""Error types for gvt.

Every failure a command can report is a `GvtError` subclass carrying the
user-facing message. The CLI maps each kind to an exit code.
"""

from __future__ import annotations


class GvtError(Exception):
    """Base class for gvt failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotInitializedError(GvtError):
    """Raised when a command runs before `init`."""

    def __init__(self) -> None:
        super().__init__(
            'Current directory is not initialized. Please use "init" command to initialize.'
        )


class AlreadyInitializedError(GvtError):
    """Raised when `init` runs in an initialized directory."""

    def __init__(self) -> None:
        super().__init__("Current directory is already initialized.")


class MissingArgumentError(GvtError):
    """Raised when a required file name was not supplied."""

    def __init__(self, operation: str):
        super().__init__(f"Please specify file to {operation}.")
        self.operation = operation


class WorkingFileNotFoundError(GvtError):
    """Raised when the named file does not exist in the working tree."""

    def __init__(self, file_name: str):
        super().__init__(f"File not found. File: {file_name}")
        self.file_name = file_name


class InvalidVersionError(GvtError):
    """Raised for missing, non-numeric or out-of-range version ids."""

    def __init__(self, raw: object):
        super().__init__(f"Invalid version number: {raw}")
        self.raw = raw


class IOFaultError(GvtError):
    """Raised when a filesystem operation fails unexpectedly.

    `operation` names the command that was running (add, detach, commit,
    checkout, ...) so the caller can report an operation-specific code.
    """

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class CorruptStateError(GvtError):
    """Raised when a pointer file is missing or does not hold a valid id."""


class VersionAlreadyExistsError(GvtError):
    """Raised when a version directory that should be new already exists."""

    def __init__(self, version: int):
        super().__init__(f"Version directory already exists: {version}")
        self.version = version
