"""termlint semantic model.

Exports the model node types and the JSON/YAML model loader.
"""
from __future__ import annotations

from termlint.model.loader import load_model, loads_model
from termlint.model.nodes import (
    PRELUDE_NAMESPACE,
    Model,
    Shape,
    ShapeId,
    ShapeType,
    SourceLocation,
    Trait,
)

__all__ = [
    "Model",
    "Shape",
    "ShapeId",
    "ShapeType",
    "SourceLocation",
    "Trait",
    "PRELUDE_NAMESPACE",
    "load_model",
    "loads_model",
]
