"""Central exception hierarchy for the chart extension.

This module defines the base exception ``AppError`` and the specialised
subclasses raised by the registry, the tabular parser and the Markdown host.
None of them escape a document conversion: handlers translate them into
placeholder fragments or the host turns them into a failed read.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all package-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'EMPTY_TABLE'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured context for logging.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(AppError):
    """Raised for an unusable registry or an invalid handler registration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("CONFIGURATION_ERROR", message, context=context)


class EmptyTableError(AppError):
    """Raised when a table has no lines at all, not even a header."""

    def __init__(
        self,
        message: str = "table has no lines",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__("EMPTY_TABLE", message, context=context)


class AssetReadError(AppError):
    """Raised when an asset cannot be read or lies outside the base directory."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("ASSET_READ_ERROR", message, context=context)
