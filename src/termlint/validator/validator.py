"""Non-inclusive terms validator: scans model text for discouraged terms.

The ``NoninclusiveTermsValidator`` resolves its term table once, at
construction, and then reports a WARNING for every configured term found
in a shape name, a namespace, or a string inside an applied trait.
Configuration mistakes raise ``ConfigurationError`` before any model is
scanned.

Usage
-----
::

    from termlint.model import load_model
    from termlint.validator import NoninclusiveTermsValidator, TermsConfig

    model = load_model("weather.json")
    validator = NoninclusiveTermsValidator(
        TermsConfig(append_terms={"sanity check": ("confidence check",)})
    )
    diagnostics = validator.validate(model)
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from termlint.errors import InvariantViolation
from termlint.model.nodes import Model, SourceLocation
from termlint.text.index import LocationKind, TextIndex, TextInstance
from termlint.validator.base import ModelValidator
from termlint.validator.diagnostics import Diagnostic, DiagnosticSeverity
from termlint.validator.messages import format_message
from termlint.validator.scanner import scan
from termlint.validator.terms import TermsConfig, TermTable

logger = logging.getLogger(__name__)


class NoninclusiveTermsValidator(ModelValidator):
    """Validates that shape names, namespaces and trait values avoid non-inclusive terms.

    Parameters
    ----------
    config:
        Append/replace configuration.  Defaults to the built-in terms.

    Raises
    ------
    ConfigurationError
        If ``config`` both appends and replaces terms, or configures the
        empty string as a term.
    """

    id = "NoninclusiveTerms"

    def __init__(self, config: TermsConfig | None = None) -> None:
        self._config = config if config is not None else TermsConfig()
        self._terms: TermTable = self._config.build()

    @classmethod
    def from_config(cls, node: Mapping[str, Any] | None) -> "NoninclusiveTermsValidator":
        """Build a validator from a mapping with camelCase configuration keys."""
        return cls(TermsConfig.from_dict(node))

    @property
    def terms(self) -> TermTable:
        """The resolved term table."""
        return self._terms

    def validate(self, model: Model) -> list[Diagnostic]:
        """Scan every text instance of ``model``.

        Parameters
        ----------
        model:
            The model to validate.

        Returns
        -------
        list[Diagnostic]
            One WARNING per term match, in text index order and then term
            table order.  Empty if no configured term occurs.
        """
        index = TextIndex.of(model)
        diagnostics = self.validate_instances(index)
        logger.debug(
            "%s: scanned %d text instance(s) for %d term(s), %d finding(s)",
            self.id,
            len(index),
            len(self._terms),
            len(diagnostics),
        )
        return diagnostics

    def validate_instances(self, instances: Iterable[TextInstance]) -> list[Diagnostic]:
        """Scan already-extracted text instances."""
        diagnostics: list[Diagnostic] = []
        for instance in instances:
            for match in scan(instance, self._terms):
                message = format_message(
                    match.term, self._terms[match.term], match.matched_text, instance
                )
                diagnostics.append(self._diagnostic(instance, message))
        return diagnostics

    def _diagnostic(self, instance: TextInstance, message: str) -> Diagnostic:
        kind = instance.location_kind
        if kind is LocationKind.NAMESPACE:
            # Namespaces are not declared by any single shape.
            location = SourceLocation.none()
            shape_id = None
        elif kind is LocationKind.APPLIED_TRAIT:
            if instance.trait is None or instance.shape is None:
                raise InvariantViolation(f"Trait text instance {instance.text!r} is incomplete")
            location = instance.trait.source_location
            shape_id = instance.shape.shape_id
        elif kind is LocationKind.SHAPE:
            if instance.shape is None:
                raise InvariantViolation(f"Shape text instance {instance.text!r} has no shape")
            location = instance.shape.source_location
            shape_id = instance.shape.shape_id
        else:
            raise InvariantViolation(f"Unknown text location kind {kind!r}")

        return Diagnostic(
            id=self.id,
            severity=DiagnosticSeverity.WARNING,
            message=message,
            source_location=location,
            shape_id=shape_id,
        )


def validate(model: Model, config: TermsConfig | None = None) -> list[Diagnostic]:
    """Convenience function: validate ``model`` with a fresh validator.

    Parameters
    ----------
    model:
        The model to validate.
    config:
        Optional append/replace configuration.

    Returns
    -------
    list[Diagnostic]
        All non-inclusive term findings.
    """
    return NoninclusiveTermsValidator(config).validate(model)
