"""termlint validator module.

Exports the ``NoninclusiveTermsValidator`` class, the ``validate``
convenience function, term table configuration and ``Diagnostic`` types.
"""
from __future__ import annotations

from termlint.validator.base import ModelValidator
from termlint.validator.diagnostics import Diagnostic, DiagnosticSeverity
from termlint.validator.messages import format_message
from termlint.validator.scanner import TermMatch, scan
from termlint.validator.terms import (
    BUILT_IN_NONINCLUSIVE_TERMS,
    TermsConfig,
    TermTable,
    build_term_table,
)
from termlint.validator.validator import NoninclusiveTermsValidator, validate

__all__ = [
    "ModelValidator",
    "NoninclusiveTermsValidator",
    "validate",
    "Diagnostic",
    "DiagnosticSeverity",
    "TermsConfig",
    "TermTable",
    "TermMatch",
    "BUILT_IN_NONINCLUSIVE_TERMS",
    "build_term_table",
    "format_message",
    "scan",
]
