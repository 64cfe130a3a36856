"""Find configured terms inside a single text instance."""
from __future__ import annotations

import re
from typing import Mapping, NamedTuple, Sequence

from termlint.text.index import TextInstance


class TermMatch(NamedTuple):
    """A term found in a text instance.

    ``matched_text`` is the slice of the instance text that matched,
    with its original casing.
    """

    term: str
    matched_text: str


def find_term(text: str, term: str) -> str | None:
    """Return the first case-insensitive occurrence of ``term`` in ``text``."""
    if not term:
        return None
    match = re.search(re.escape(term), text, re.IGNORECASE)
    return match.group(0) if match is not None else None


def scan(instance: TextInstance, table: Mapping[str, Sequence[str]]) -> list[TermMatch]:
    """Return one match per term of ``table`` found in ``instance.text``.

    Only the first occurrence of each term is reported.  Matches follow
    the table's iteration order.
    """
    matches: list[TermMatch] = []
    for term in table:
        matched = find_term(instance.text, term)
        if matched is not None:
            matches.append(TermMatch(term, matched))
    return matches
