"""Message rendering for non-inclusive term findings.

The wording depends on where the text was found, and suggested
replacements follow the case of the matched text: ``MasterRecord``
suggests ``Primary``, ``is_master`` suggests ``primary``.
"""
from __future__ import annotations

from typing import Sequence

from termlint.errors import InvariantViolation
from termlint.text.index import LocationKind, TextInstance

_ADDENDUM = " Consider using one of the following terms instead: {}."


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def uncapitalize(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return text[:1].lower() + text[1:]


def quoted_list(values: Sequence[str]) -> str:
    """Render ``values`` as ``'a'``, ``'a' and 'b'`` or ``'a', 'b' and 'c'``."""
    quoted = [f"'{value}'" for value in values]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} and {quoted[-1]}"


def match_case(suggestions: Sequence[str], matched_text: str) -> list[str]:
    """Adjust each suggestion's first letter to the case of ``matched_text``."""
    adjust = capitalize if matched_text[:1].isupper() else uncapitalize
    return [adjust(suggestion) for suggestion in suggestions]


def format_message(
    term: str,
    suggestions: Sequence[str],
    matched_text: str,
    instance: TextInstance,
) -> str:
    """Render the diagnostic message for one term match.

    Parameters
    ----------
    term:
        The configured term that matched.
    suggestions:
        Replacements configured for ``term``; may be empty.
    matched_text:
        The matching slice of ``instance.text``, original casing.
    instance:
        The text instance that contains the match.

    Raises
    ------
    InvariantViolation
        If ``instance`` has a location kind this formatter does not know,
        or lacks the shape/trait its kind requires.
    """
    addendum = _ADDENDUM.format(quoted_list(match_case(suggestions, matched_text))) if suggestions else ""
    kind = instance.location_kind

    if kind is LocationKind.SHAPE:
        if instance.shape is None:
            raise InvariantViolation(f"Shape text instance {instance.text!r} has no shape")
        shape_type = capitalize(str(instance.shape.shape_type))
        return f"{shape_type} shape uses a non-inclusive term '{matched_text}'.{addendum}"

    if kind is LocationKind.NAMESPACE:
        return f"{instance.text} namespace uses a non-inclusive term '{matched_text}'.{addendum}"

    if kind is LocationKind.APPLIED_TRAIT:
        if instance.trait is None:
            raise InvariantViolation(f"Trait text instance {instance.text!r} has no trait")
        trait_name = instance.trait.idiomatic_name
        if not instance.trait_property_path:
            return (
                f"'{trait_name}' trait has a value that contains a non-inclusive term "
                f"'{matched_text}'.{addendum}"
            )
        path = "/".join(instance.trait_property_path)
        return (
            f"'{trait_name}' trait value at path {path} contains a non-inclusive term "
            f"'{matched_text}'.{addendum}"
        )

    raise InvariantViolation(f"Unknown text location kind {kind!r} for {term!r}")
