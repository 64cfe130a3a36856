"""Validator registry for termlint.

Validators are looked up by name and built from a plain configuration
mapping, the way a model's validation configuration names them::

    validators:
      - name: NoninclusiveTerms
        configuration:
          appendNoninclusiveTerms:
            sanity check: [confidence check]

Third-party validators register via the decorator at import time, or
are discovered from entry-points in the "termlint.validators" group.

Example
-------
Register a validator with the decorator::

    from termlint.plugins.registry import VALIDATORS
    from termlint.validator.base import ModelValidator

    @VALIDATORS.register("NoEmptyNamespaces")
    class NoEmptyNamespaces(ModelValidator):
        def validate(self, model):
            ...

Build a configured instance::

    validator = create_validator("NoninclusiveTerms", {"replaceNoninclusiveTerms": {...}})
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Any, Mapping

from termlint.validator.base import ModelValidator
from termlint.validator.validator import NoninclusiveTermsValidator

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "termlint.validators"


class ValidatorNotFoundError(KeyError):
    """Raised when a requested validator name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.validator_name = name
        super().__init__(
            f"Validator {name!r} is not registered. "
            f"Available validators: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )


class ValidatorAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.validator_name = name
        super().__init__(
            f"Validator {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class ValidatorRegistry:
    """Name-keyed registry of ``ModelValidator`` subclasses."""

    def __init__(self) -> None:
        self._validators: dict[str, type[ModelValidator]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[ModelValidator]], type[ModelValidator]]:
        """Return a class decorator that registers the decorated validator.

        Raises
        ------
        ValidatorAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``ModelValidator``.
        """

        def decorator(cls: type[ModelValidator]) -> type[ModelValidator]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[ModelValidator]) -> None:
        """Register ``cls`` under ``name`` without the decorator syntax."""
        if name in self._validators:
            raise ValidatorAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, ModelValidator)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of ModelValidator."
            )
        self._validators[name] = cls
        logger.debug("Registered validator %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove a validator from the registry.

        Raises
        ------
        ValidatorNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._validators:
            raise ValidatorNotFoundError(name, self.list_validators())
        del self._validators[name]
        logger.debug("Deregistered validator %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[ModelValidator]:
        try:
            return self._validators[name]
        except KeyError:
            raise ValidatorNotFoundError(name, self.list_validators()) from None

    def create(self, name: str, config: Mapping[str, Any] | None = None) -> ModelValidator:
        """Build the validator registered under ``name`` from ``config``.

        Raises
        ------
        ValidatorNotFoundError
            If no validator is registered under ``name``.
        termlint.errors.ConfigurationError
            If the validator rejects ``config``.
        """
        return self.get(name).from_config(config)

    def list_validators(self) -> list[str]:
        """Return registered validator names in alphabetical order."""
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorRegistry(validators={self.list_validators()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register validators declared as package entry-points.

        Entry-points whose name is already registered are skipped, so
        repeated calls are idempotent.  Entry-points that fail to import
        or do not name a ``ModelValidator`` are logged and skipped.

        In a downstream package's ``pyproject.toml``::

            [project.entry-points."termlint.validators"]
            NoEmptyNamespaces = "my_package.validators:NoEmptyNamespaces"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._validators:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (ValidatorAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


VALIDATORS = ValidatorRegistry()
VALIDATORS.register_class(NoninclusiveTermsValidator.id, NoninclusiveTermsValidator)


def create_validator(name: str, config: Mapping[str, Any] | None = None) -> ModelValidator:
    """Build a validator from the process-wide registry."""
    return VALIDATORS.create(name, config)
