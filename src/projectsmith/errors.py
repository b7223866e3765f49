"""Exception types surfaced to users of the scaffolder."""

from __future__ import annotations

__all__ = [
    "DirectoryConfirmationDeclinedError",
    "InvalidAppSyntaxError",
    "InvalidModuleSyntaxError",
    "MissingPathError",
    "ModuleNameTakenError",
    "ReservedOrTakenAppNameError",
    "ScaffoldError",
]


class ScaffoldError(RuntimeError):
    """Raised when a project cannot be generated from the given input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MissingPathError(ScaffoldError):
    """Raised when no target path was supplied."""


class InvalidAppSyntaxError(ScaffoldError):
    """Raised when an application name does not match the allowed grammar."""


class ReservedOrTakenAppNameError(ScaffoldError):
    """Raised when an application name is reserved or already loadable."""


class InvalidModuleSyntaxError(ScaffoldError):
    """Raised when a module name is not a dotted sequence of aliases."""


class ModuleNameTakenError(ScaffoldError):
    """Raised when a module name already resolves in the host namespace."""


class DirectoryConfirmationDeclinedError(ScaffoldError):
    """Raised when the target directory exists and the user declined to continue."""
