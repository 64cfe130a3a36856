"""Unit tests for termlint.plugins.registry: ValidatorRegistry, error
types, entry-point loading, and the process-wide registry.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from termlint.errors import ConfigurationError
from termlint.model.nodes import Model
from termlint.plugins.registry import (
    VALIDATORS,
    ValidatorAlreadyRegisteredError,
    ValidatorNotFoundError,
    ValidatorRegistry,
    create_validator,
)
from termlint.validator.base import ModelValidator
from termlint.validator.diagnostics import Diagnostic
from termlint.validator.validator import NoninclusiveTermsValidator

# ---------------------------------------------------------------------------
# Test fixtures: concrete validators
# ---------------------------------------------------------------------------


class AlwaysClean(ModelValidator):
    id = "AlwaysClean"

    def validate(self, model: Model) -> list[Diagnostic]:
        return []


class NotAValidator:
    """Does NOT subclass ModelValidator, used for error path testing."""


def _entry_point(name: str, loaded: object = None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


# ===========================================================================
# Errors
# ===========================================================================


class TestErrors:
    def test_not_found_is_key_error(self) -> None:
        error = ValidatorNotFoundError("Missing", ["A", "B"])
        assert isinstance(error, KeyError)
        assert error.validator_name == "Missing"
        assert "A, B" in str(error)

    def test_already_registered_is_value_error(self) -> None:
        error = ValidatorAlreadyRegisteredError("Dup")
        assert isinstance(error, ValueError)
        assert "Dup" in str(error)


# ===========================================================================
# Registration and lookup
# ===========================================================================


class TestValidatorRegistry:
    def test_register_decorator_returns_class(self) -> None:
        registry = ValidatorRegistry()
        decorated = registry.register("AlwaysClean")(AlwaysClean)
        assert decorated is AlwaysClean
        assert registry.get("AlwaysClean") is AlwaysClean

    def test_duplicate_registration(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("AlwaysClean", AlwaysClean)
        with pytest.raises(ValidatorAlreadyRegisteredError):
            registry.register_class("AlwaysClean", AlwaysClean)

    def test_non_validator_rejected(self) -> None:
        registry = ValidatorRegistry()
        with pytest.raises(TypeError):
            registry.register_class("Bad", NotAValidator)  # type: ignore[arg-type]

    def test_get_missing(self) -> None:
        with pytest.raises(ValidatorNotFoundError):
            ValidatorRegistry().get("Missing")

    def test_deregister(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("AlwaysClean", AlwaysClean)
        registry.deregister("AlwaysClean")
        assert "AlwaysClean" not in registry
        with pytest.raises(ValidatorNotFoundError):
            registry.deregister("AlwaysClean")

    def test_list_len_repr(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("Zed", AlwaysClean)
        registry.register_class("Abc", AlwaysClean)
        assert registry.list_validators() == ["Abc", "Zed"]
        assert len(registry) == 2
        assert "Abc" in repr(registry)

    def test_create_without_config(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("AlwaysClean", AlwaysClean)
        assert isinstance(registry.create("AlwaysClean"), AlwaysClean)

    def test_create_rejects_config_for_unconfigurable(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("AlwaysClean", AlwaysClean)
        with pytest.raises(TypeError):
            registry.create("AlwaysClean", {"anything": 1})


# ===========================================================================
# Entry-points
# ===========================================================================


class TestLoadEntrypoints:
    def test_registers_loaded_class(self) -> None:
        registry = ValidatorRegistry()
        with patch(
            "termlint.plugins.registry.importlib.metadata.entry_points",
            return_value=[_entry_point("AlwaysClean", AlwaysClean)],
        ):
            registry.load_entrypoints()
        assert registry.get("AlwaysClean") is AlwaysClean

    def test_skips_already_registered(self) -> None:
        registry = ValidatorRegistry()
        registry.register_class("AlwaysClean", AlwaysClean)
        ep = _entry_point("AlwaysClean", AlwaysClean)
        with patch("termlint.plugins.registry.importlib.metadata.entry_points", return_value=[ep]):
            registry.load_entrypoints()
        ep.load.assert_not_called()

    def test_failed_import_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = ValidatorRegistry()
        ep = _entry_point("Broken", error=ImportError("no module"))
        with patch("termlint.plugins.registry.importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.ERROR, logger="termlint.plugins.registry"):
                registry.load_entrypoints()
        assert "Broken" not in registry
        assert "Failed to load entry-point" in caplog.text

    def test_wrong_type_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = ValidatorRegistry()
        ep = _entry_point("Wrong", NotAValidator)
        with patch("termlint.plugins.registry.importlib.metadata.entry_points", return_value=[ep]):
            with caplog.at_level(logging.WARNING, logger="termlint.plugins.registry"):
                registry.load_entrypoints()
        assert "Wrong" not in registry
        assert "could not be registered" in caplog.text

    def test_uses_default_group(self) -> None:
        with patch(
            "termlint.plugins.registry.importlib.metadata.entry_points", return_value=[]
        ) as entry_points:
            ValidatorRegistry().load_entrypoints()
        entry_points.assert_called_once_with(group="termlint.validators")


# ===========================================================================
# Process-wide registry
# ===========================================================================


class TestBuiltInRegistry:
    def test_noninclusive_terms_registered(self) -> None:
        assert VALIDATORS.get("NoninclusiveTerms") is NoninclusiveTermsValidator

    def test_create_validator_with_config(self) -> None:
        validator = create_validator(
            "NoninclusiveTerms", {"appendNoninclusiveTerms": {"foo": ["bar"]}}
        )
        assert isinstance(validator, NoninclusiveTermsValidator)
        assert validator.terms["foo"] == ("bar",)

    def test_create_validator_rejects_bad_config(self) -> None:
        with pytest.raises(ConfigurationError):
            create_validator(
                "NoninclusiveTerms",
                {"appendNoninclusiveTerms": {"a": ["b"]}, "replaceNoninclusiveTerms": {"c": ["d"]}},
            )
