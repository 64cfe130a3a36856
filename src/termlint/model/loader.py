"""Load a ``Model`` from a JSON or YAML AST document.

The document layout follows the Smithy JSON AST::

    {
      "smithy": "2.0",
      "metadata": {...},
      "shapes": {
        "example.weather#City": {
          "type": "structure",
          "traits": {"smithy.api#documentation": "A city."},
          "members": {
            "cityId": {"target": "example.weather#CityId", "traits": {...}}
          }
        }
      }
    }

YAML is a superset of JSON, so both formats go through PyYAML's
composer.  Working on the composed node graph instead of the loaded
Python objects lets every shape, member and trait keep the line and
column it was declared at.

Usage
-----
::

    from termlint.model.loader import load_model

    model = load_model("weather.json")
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from termlint.errors import ModelLoadError
from termlint.model.nodes import (
    PRELUDE_NAMESPACE,
    Model,
    Shape,
    ShapeId,
    ShapeType,
    SourceLocation,
    Trait,
)

logger = logging.getLogger(__name__)

# Keys that declare a single member on collection shapes.
_COLLECTION_MEMBER_KEYS = ("member", "key", "value")


class _ModelReader:
    """Turns a composed YAML node graph into model nodes for one document."""

    def __init__(self, filename: str) -> None:
        self._filename = filename
        self._constructor = yaml.constructor.SafeConstructor()

    def location(self, node: yaml.Node) -> SourceLocation:
        mark = node.start_mark
        return SourceLocation(filename=self._filename, line=mark.line + 1, column=mark.column + 1)

    def error(self, message: str, node: yaml.Node) -> ModelLoadError:
        return ModelLoadError(message, self.location(node))

    # ------------------------------------------------------------------
    # Node helpers
    # ------------------------------------------------------------------

    def mapping_items(self, node: yaml.Node, what: str) -> list[tuple[str, yaml.Node, yaml.Node]]:
        if not isinstance(node, yaml.MappingNode):
            raise self.error(f"{what} must be an object", node)
        items: list[tuple[str, yaml.Node, yaml.Node]] = []
        seen: set[str] = set()
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise self.error(f"{what} keys must be strings", key_node)
            key = key_node.value
            if key in seen:
                raise self.error(f"Duplicate key {key!r} in {what}", key_node)
            seen.add(key)
            items.append((key, key_node, value_node))
        return items

    def string(self, node: yaml.Node, what: str) -> str:
        if not isinstance(node, yaml.ScalarNode) or node.tag != "tag:yaml.org,2002:str":
            raise self.error(f"{what} must be a string", node)
        return node.value

    def shape_id(self, text: str, node: yaml.Node) -> ShapeId:
        try:
            return ShapeId.parse(text)
        except ValueError as exc:
            raise self.error(str(exc), node) from exc

    def plain_value(self, node: yaml.Node) -> Any:
        """Convert a node to plain Python data with PyYAML's safe constructor."""
        try:
            return self._constructor.construct_object(node, deep=True)
        except (yaml.YAMLError, ValueError, TypeError) as exc:
            raise self.error(f"Invalid value: {exc}", node) from exc

    # ------------------------------------------------------------------
    # Model elements
    # ------------------------------------------------------------------

    def read_model(self, root: yaml.Node) -> Model:
        shapes: list[Shape] = []
        metadata: dict[str, Any] = {}
        for key, key_node, value_node in self.mapping_items(root, "Model document"):
            if key == "smithy":
                self.string(value_node, "'smithy' version")
            elif key == "metadata":
                metadata = self.plain_value(value_node)
                if not isinstance(metadata, dict):
                    raise self.error("'metadata' must be an object", value_node)
            elif key == "shapes":
                for shape_key, shape_key_node, shape_node in self.mapping_items(value_node, "'shapes'"):
                    shapes.append(self.read_shape(shape_key, shape_key_node, shape_node))
            else:
                raise self.error(f"Unexpected top-level key {key!r}", key_node)
        return Model(shapes=tuple(shapes), metadata=metadata)

    def read_shape(self, key: str, key_node: yaml.Node, node: yaml.Node) -> Shape:
        shape_id = self.shape_id(key, key_node)
        if shape_id.member is not None:
            raise self.error(f"Top-level shape id {key!r} must not name a member", key_node)

        shape_type: ShapeType | None = None
        traits: tuple[Trait, ...] = ()
        members: list[Shape] = []
        for prop, prop_node, value_node in self.mapping_items(node, f"Shape {key!r}"):
            if prop == "type":
                type_name = self.string(value_node, "Shape type")
                try:
                    shape_type = ShapeType(type_name)
                except ValueError:
                    raise self.error(f"Unknown shape type {type_name!r}", value_node) from None
                if shape_type is ShapeType.MEMBER:
                    raise self.error("Top-level shapes cannot have type 'member'", value_node)
            elif prop == "traits":
                traits = self.read_traits(value_node)
            elif prop == "members":
                for member_name, member_key_node, member_node in self.mapping_items(
                    value_node, f"Members of {key!r}"
                ):
                    members.append(
                        self.read_member(shape_id.with_member(member_name), member_key_node, member_node)
                    )
            elif prop in _COLLECTION_MEMBER_KEYS:
                members.append(self.read_member(shape_id.with_member(prop), prop_node, value_node))
            # Remaining properties (operations, input, mixins, ...) carry no text.

        if shape_type is None:
            raise self.error(f"Shape {key!r} is missing a 'type'", key_node)
        return Shape(
            shape_id=shape_id,
            shape_type=shape_type,
            traits=traits,
            members=tuple(members),
            source_location=self.location(key_node),
        )

    def read_member(self, member_id: ShapeId, key_node: yaml.Node, node: yaml.Node) -> Shape:
        target: ShapeId | None = None
        traits: tuple[Trait, ...] = ()
        for prop, _, value_node in self.mapping_items(node, f"Member {str(member_id)!r}"):
            if prop == "target":
                target = self.shape_id(self.string(value_node, "Member target"), value_node)
            elif prop == "traits":
                traits = self.read_traits(value_node)
        if target is None:
            raise self.error(f"Member {str(member_id)!r} is missing a 'target'", key_node)
        return Shape(
            shape_id=member_id,
            shape_type=ShapeType.MEMBER,
            traits=traits,
            source_location=self.location(key_node),
            target=target,
        )

    def read_traits(self, node: yaml.Node) -> tuple[Trait, ...]:
        traits: list[Trait] = []
        for key, key_node, value_node in self.mapping_items(node, "'traits'"):
            # Relative trait names resolve to the prelude.
            trait_id = self.shape_id(key if "#" in key else f"{PRELUDE_NAMESPACE}#{key}", key_node)
            traits.append(
                Trait(
                    trait_id=trait_id,
                    value=self.plain_value(value_node),
                    source_location=self.location(key_node),
                )
            )
        return tuple(traits)


def loads_model(text: str, filename: str = "<string>") -> Model:
    """Parse a model document from a string.

    Parameters
    ----------
    text:
        JSON or YAML model document.
    filename:
        Label used in the source locations of the resulting nodes.

    Raises
    ------
    ModelLoadError
        If the document is not valid YAML/JSON or does not describe a model.
    """
    try:
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        location = (
            SourceLocation(filename=filename, line=mark.line + 1, column=mark.column + 1)
            if mark is not None
            else SourceLocation(filename=filename)
        )
        raise ModelLoadError(f"Invalid model document: {exc}", location) from exc

    if root is None:
        logger.debug("Model document %s is empty", filename)
        return Model()

    model = _ModelReader(filename).read_model(root)
    logger.debug("Loaded %d shape(s) from %s", len(model.shapes), filename)
    return model


def load_model(path: str | Path) -> Model:
    """Read and parse a model document from ``path``.

    Raises
    ------
    ModelLoadError
        If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelLoadError(f"Cannot read model file: {exc}", SourceLocation(filename=str(path))) from exc
    return loads_model(text, filename=str(path))
