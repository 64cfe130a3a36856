"""Index of the human-authored text contained in a model.

``TextIndex.of(model)`` walks every shape of a model and records one
``TextInstance`` per piece of text a person wrote: shape and member
names, namespace names, and every string found inside an applied
trait's value.  Each instance is tagged with a ``LocationKind`` so
validators can tell where the text came from.

Order is stable: shapes in declaration order (members right after their
container, each shape followed by its trait values), then one instance
per distinct namespace.
"""
from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

from termlint.model.nodes import PRELUDE_NAMESPACE, Model, Shape, Trait

logger = logging.getLogger(__name__)

# Prelude traits whose string values are shape ids, not prose.
_REFERENCE_TRAITS = frozenset({"references", "idRef"})


class LocationKind(Enum):
    """Where a piece of text was found."""

    NAMESPACE = auto()
    SHAPE = auto()
    APPLIED_TRAIT = auto()


@dataclass(frozen=True, slots=True)
class TextInstance:
    """A string found in a model, tagged with its location.

    Parameters
    ----------
    text:
        The text exactly as written.
    location_kind:
        Whether the text is a namespace, a shape name or a trait value.
    shape:
        The shape the text belongs to.  ``None`` for namespaces.
    trait:
        The trait whose value contains the text, for ``APPLIED_TRAIT``.
    trait_property_path:
        Keys and list indexes leading from the trait value's root to the
        text.  Empty when the trait value itself is the string.
    """

    text: str
    location_kind: LocationKind
    shape: Shape | None = None
    trait: Trait | None = None
    trait_property_path: tuple[str, ...] = ()

    @classmethod
    def for_namespace(cls, namespace: str) -> "TextInstance":
        return cls(text=namespace, location_kind=LocationKind.NAMESPACE)

    @classmethod
    def for_shape(cls, shape: Shape) -> "TextInstance":
        return cls(text=shape.name, location_kind=LocationKind.SHAPE, shape=shape)

    @classmethod
    def for_trait(
        cls,
        text: str,
        shape: Shape,
        trait: Trait,
        path: tuple[str, ...] = (),
    ) -> "TextInstance":
        return cls(
            text=text,
            location_kind=LocationKind.APPLIED_TRAIT,
            shape=shape,
            trait=trait,
            trait_property_path=path,
        )


class TextIndex:
    """All text instances of one model.

    Use ``TextIndex.of(model)`` rather than the constructor; the index is
    computed once and cached for the lifetime of the model object.
    """

    _cache: "weakref.WeakKeyDictionary[Model, TextIndex]" = weakref.WeakKeyDictionary()

    def __init__(self, model: Model) -> None:
        instances: list[TextInstance] = []
        namespaces: dict[str, None] = {}
        for shape in model.walk():
            namespaces.setdefault(shape.namespace, None)
            instances.append(TextInstance.for_shape(shape))
            for trait in shape.traits:
                if _is_reference_trait(trait):
                    continue
                instances.extend(_trait_instances(shape, trait, trait.value, ()))
        instances.extend(TextInstance.for_namespace(ns) for ns in namespaces)
        self._instances: tuple[TextInstance, ...] = tuple(instances)
        logger.debug(
            "Indexed %d text instance(s) across %d namespace(s)",
            len(self._instances),
            len(namespaces),
        )

    @classmethod
    def of(cls, model: Model) -> "TextIndex":
        """Return the (cached) text index of ``model``."""
        index = cls._cache.get(model)
        if index is None:
            index = cls(model)
            cls._cache[model] = index
        return index

    def __iter__(self) -> Iterator[TextInstance]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)


def _is_reference_trait(trait: Trait) -> bool:
    return trait.trait_id.namespace == PRELUDE_NAMESPACE and trait.trait_id.name in _REFERENCE_TRAITS


def _trait_instances(
    shape: Shape,
    trait: Trait,
    value: Any,
    path: tuple[str, ...],
) -> Iterator[TextInstance]:
    if isinstance(value, str):
        yield TextInstance.for_trait(value, shape, trait, path)
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _trait_instances(shape, trait, item, (*path, str(key)))
    elif isinstance(value, list):
        for position, item in enumerate(value):
            yield from _trait_instances(shape, trait, item, (*path, str(position)))
