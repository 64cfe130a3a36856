"""Semantic model types consumed by the termlint validators.

The model is deliberately small: shapes with their members and applied
traits, plus the source locations needed to attach diagnostics.  Every
node is a frozen dataclass so a model can be shared between validators
without defensive copying.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

PRELUDE_NAMESPACE = "smithy.api"


# ---------------------------------------------------------------------------
# Source location
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a model element within its source document.

    Parameters
    ----------
    filename:
        Path or label of the document the element was read from.
    line:
        1-based line number, or ``0`` when unknown.
    column:
        1-based column number, or ``0`` when unknown.
    """

    filename: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename} [{self.line}, {self.column}]"

    @classmethod
    def none(cls) -> "SourceLocation":
        """Return the sentinel used for findings with no source position."""
        return _NONE_LOCATION

    @property
    def is_none(self) -> bool:
        return self == _NONE_LOCATION

    def to_dict(self) -> dict[str, object] | None:
        if self.is_none:
            return None
        return {"filename": self.filename, "line": self.line, "column": self.column}


_NONE_LOCATION = SourceLocation(filename="N/A", line=0, column=0)


# ---------------------------------------------------------------------------
# Shape identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ShapeId:
    """Absolute shape identifier: ``namespace#Name`` or ``namespace#Name$member``."""

    namespace: str
    name: str
    member: str | None = None

    def __str__(self) -> str:
        base = f"{self.namespace}#{self.name}"
        return f"{base}${self.member}" if self.member is not None else base

    @classmethod
    def parse(cls, text: str) -> "ShapeId":
        """Parse an absolute shape id.

        Raises
        ------
        ValueError
            If ``text`` is not of the form ``namespace#Name[$member]``.
        """
        namespace, sep, rest = text.partition("#")
        if not sep or not namespace or not rest:
            raise ValueError(f"Invalid shape id {text!r}: expected 'namespace#Name'")
        name, dollar, member = rest.partition("$")
        if not name or (dollar and not member):
            raise ValueError(f"Invalid shape id {text!r}")
        return cls(namespace=namespace, name=name, member=member if dollar else None)

    def with_member(self, member: str) -> "ShapeId":
        return ShapeId(namespace=self.namespace, name=self.name, member=member)


# ---------------------------------------------------------------------------
# Shape types
# ---------------------------------------------------------------------------


class ShapeType(Enum):
    """Kinds of shapes a model can contain; ``str()`` gives the model keyword."""

    BLOB = "blob"
    BOOLEAN = "boolean"
    STRING = "string"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_DECIMAL = "bigDecimal"
    BIG_INTEGER = "bigInteger"
    TIMESTAMP = "timestamp"
    DOCUMENT = "document"
    ENUM = "enum"
    INT_ENUM = "intEnum"
    LIST = "list"
    SET = "set"
    MAP = "map"
    STRUCTURE = "structure"
    UNION = "union"
    SERVICE = "service"
    OPERATION = "operation"
    RESOURCE = "resource"
    MEMBER = "member"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Traits and shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Trait:
    """A trait applied to a shape.

    ``value`` is the trait's node value as plain Python data: ``None``,
    ``bool``, ``int``, ``float``, ``str``, ``list`` or ``dict``.
    """

    trait_id: ShapeId
    value: Any
    source_location: SourceLocation = field(default_factory=SourceLocation.none)

    @property
    def idiomatic_name(self) -> str:
        """Bare trait name for prelude traits, the absolute id otherwise."""
        if self.trait_id.namespace == PRELUDE_NAMESPACE:
            return self.trait_id.name
        return str(self.trait_id)


@dataclass(frozen=True, slots=True)
class Shape:
    """A named shape, or a member of one when ``shape_type`` is ``MEMBER``."""

    shape_id: ShapeId
    shape_type: ShapeType
    traits: tuple[Trait, ...] = ()
    members: tuple["Shape", ...] = ()
    source_location: SourceLocation = field(default_factory=SourceLocation.none)
    target: ShapeId | None = None

    @property
    def name(self) -> str:
        """Member name for members, shape name otherwise."""
        if self.shape_id.member is not None:
            return self.shape_id.member
        return self.shape_id.name

    @property
    def namespace(self) -> str:
        return self.shape_id.namespace

    def find_trait(self, trait_id: ShapeId | str) -> Trait | None:
        """Return the applied trait with ``trait_id``, or ``None``."""
        wanted = ShapeId.parse(trait_id) if isinstance(trait_id, str) else trait_id
        for trait in self.traits:
            if trait.trait_id == wanted:
                return trait
        return None


@dataclass(frozen=True, eq=False)
class Model:
    """An ordered collection of top-level shapes.

    Models compare and hash by identity so derived indexes can be cached
    per model object.
    """

    shapes: tuple[Shape, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Shape]:
        return self.walk()

    def walk(self) -> Iterator[Shape]:
        """Yield every shape in declaration order, members right after their container."""
        for shape in self.shapes:
            yield shape
            yield from shape.members

    def get_shape(self, shape_id: ShapeId | str) -> Shape | None:
        wanted = ShapeId.parse(shape_id) if isinstance(shape_id, str) else shape_id
        for shape in self.walk():
            if shape.shape_id == wanted:
                return shape
        return None

    @property
    def namespaces(self) -> list[str]:
        """Distinct namespaces of top-level shapes, in first-seen order."""
        seen: dict[str, None] = {}
        for shape in self.shapes:
            seen.setdefault(shape.namespace, None)
        return list(seen)
