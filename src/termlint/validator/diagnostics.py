"""Diagnostic types produced by termlint validators.

A ``Diagnostic`` is a finding attached to a model source location.  It
is created once by a validator and never modified afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from termlint.model.nodes import ShapeId, SourceLocation


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, least to most serious."""

    NOTE = "NOTE"
    WARNING = "WARNING"
    DANGER = "DANGER"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding.

    Parameters
    ----------
    id:
        Identifier of the validator that produced the finding, e.g.
        ``"NoninclusiveTerms"``.
    severity:
        How serious this finding is.
    message:
        Human-readable description of the problem.
    source_location:
        Where the offending text was declared.  ``SourceLocation.none()``
        for findings not tied to a single declaration.
    shape_id:
        The shape the finding is attached to, if any.
    """

    id: str
    severity: DiagnosticSeverity
    message: str
    source_location: SourceLocation = field(default_factory=SourceLocation.none)
    shape_id: ShapeId | None = field(default=None)

    def __str__(self) -> str:
        prefix = f"[{self.severity.value}] {self.id}"
        target = f" {self.shape_id}" if self.shape_id is not None else " -"
        return f"{prefix}:{target} {self.message} | {self.source_location}"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should block a successful validation."""
        return self.severity in (DiagnosticSeverity.DANGER, DiagnosticSeverity.ERROR)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON-friendly form used by the CLI."""
        return {
            "id": self.id,
            "severity": self.severity.value,
            "shapeId": str(self.shape_id) if self.shape_id is not None else None,
            "sourceLocation": self.source_location.to_dict(),
            "message": self.message,
        }
