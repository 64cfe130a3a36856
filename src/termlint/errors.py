"""Error types for termlint.

Configuration mistakes are raised when a validator is constructed, so a
model is never scanned with a half-valid term table.  Model loading
errors carry the ``SourceLocation`` of the offending node so the CLI can
point at the right line.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termlint.model.nodes import SourceLocation


class ConfigurationError(ValueError):
    """Raised when a validator configuration is invalid."""


class InvariantViolation(RuntimeError):
    """Raised when a collaborator hands the validator an impossible value.

    This always indicates a bug in the code producing text instances,
    never a problem with the model being validated.
    """


class ModelLoadError(ValueError):
    """Raised when a model document cannot be turned into a ``Model``."""

    def __init__(self, message: str, source_location: "SourceLocation") -> None:
        self.source_location = source_location
        super().__init__(f"{source_location}: {message}")
