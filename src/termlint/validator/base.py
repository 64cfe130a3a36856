"""Base class shared by model validators."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping

from termlint.model.nodes import Model
from termlint.validator.diagnostics import Diagnostic


class ModelValidator(ABC):
    """A validator that inspects a whole model and reports diagnostics.

    Subclasses set ``id`` and implement ``validate``.  ``from_config``
    builds an instance from a plain configuration mapping, as read from a
    YAML or JSON document.
    """

    id: ClassVar[str] = ""

    @classmethod
    def from_config(cls, node: Mapping[str, Any] | None) -> "ModelValidator":
        if node:
            raise TypeError(f"{cls.__name__} does not accept configuration")
        return cls()

    @abstractmethod
    def validate(self, model: Model) -> list[Diagnostic]:
        """Return the findings for ``model``."""
