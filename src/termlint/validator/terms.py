"""Non-inclusive term tables and their configuration.

A ``TermTable`` maps a lowercase term to the replacements that should be
suggested for it.  The only way to obtain one is ``build_term_table``,
which applies the append/replace configuration on top of the built-in
terms and rejects configurations that cannot be honoured.

Configuration documents use the camelCase keys shared with other model
tooling::

    appendNoninclusiveTerms:
      sanity check: [confidence check, coherence check]

or::

    replaceNoninclusiveTerms:
      master: [primary]

Only one of the two keys may be non-empty.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

import yaml

from termlint.errors import ConfigurationError

logger = logging.getLogger(__name__)

APPEND_KEY = "appendNoninclusiveTerms"
REPLACE_KEY = "replaceNoninclusiveTerms"

TermMap = Mapping[str, Sequence[str]]

BUILT_IN_NONINCLUSIVE_TERMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "master": ("primary", "parent", "main"),
    "slave": ("secondary", "replica", "clone", "child"),
    "blacklist": ("denyList",),
    "whitelist": ("allowList",),
})


class TermTable(Mapping[str, tuple[str, ...]]):
    """Read-only mapping of lowercase term to suggested replacements.

    Iteration order is the resolution order: built-in terms first, then
    appended ones, or the replacement table's own order.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Mapping[str, tuple[str, ...]]) -> None:
        self._terms = MappingProxyType(dict(terms))

    def __getitem__(self, term: str) -> tuple[str, ...]:
        return self._terms[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"TermTable({dict(self._terms)!r})"


def build_term_table(
    builtins: TermMap = BUILT_IN_NONINCLUSIVE_TERMS,
    append_terms: TermMap | None = None,
    replace_terms: TermMap | None = None,
) -> TermTable:
    """Resolve the final term table.

    Parameters
    ----------
    builtins:
        Default terms, used unless ``replace_terms`` is given.
    append_terms:
        Terms added to ``builtins``.  On a key collision the appended
        suggestions win.
    replace_terms:
        Terms used verbatim instead of ``builtins``.

    Returns
    -------
    TermTable
        Keys are lowercased; suggestions keep their case.

    Raises
    ------
    ConfigurationError
        If both ``append_terms`` and ``replace_terms`` are non-empty, or
        if the resolved table contains the empty term.
    """
    append_terms = append_terms or {}
    replace_terms = replace_terms or {}
    if append_terms and replace_terms:
        raise ConfigurationError(
            "Cannot specify both terms to replace built-ins and terms to append."
        )

    resolved: dict[str, tuple[str, ...]] = {}
    sources = (replace_terms,) if replace_terms else (builtins, append_terms)
    for source in sources:
        for term, suggestions in source.items():
            resolved[term.lower()] = tuple(suggestions)

    if "" in resolved:
        raise ConfigurationError("Empty string is not a valid non-inclusive term")

    logger.debug(
        "Resolved %d non-inclusive term(s) (%s)",
        len(resolved),
        "replaced built-ins" if replace_terms else "built-ins plus appended",
    )
    return TermTable(resolved)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def _term_map(value: Any, key: str) -> dict[str, tuple[str, ...]]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{key!r} must be a mapping of term to suggestions")
    terms: dict[str, tuple[str, ...]] = {}
    for term, suggestions in value.items():
        if not isinstance(term, str):
            raise ConfigurationError(f"{key!r}: term {term!r} must be a string")
        if suggestions is None:
            suggestions = []
        if not isinstance(suggestions, (list, tuple)) or not all(
            isinstance(s, str) for s in suggestions
        ):
            raise ConfigurationError(
                f"{key!r}: suggestions for {term!r} must be a list of strings"
            )
        terms[term] = tuple(suggestions)
    return terms


@dataclass(frozen=True)
class TermsConfig:
    """Configuration of the non-inclusive terms validator.

    Parameters
    ----------
    append_terms:
        Terms added to the built-in table.
    replace_terms:
        Terms used instead of the built-in table.
    """

    append_terms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    replace_terms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, node: Mapping[str, Any] | None) -> "TermsConfig":
        """Deserialize a configuration mapping with camelCase keys.

        Raises
        ------
        ConfigurationError
            On unknown keys or values of the wrong shape.
        """
        if node is None:
            return cls()
        if not isinstance(node, Mapping):
            raise ConfigurationError("Validator configuration must be a mapping")
        unknown = sorted(str(k) for k in node if k not in (APPEND_KEY, REPLACE_KEY))
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration key(s): {', '.join(unknown)}. "
                f"Expected {APPEND_KEY!r} or {REPLACE_KEY!r}."
            )
        return cls(
            append_terms=_term_map(node.get(APPEND_KEY), APPEND_KEY),
            replace_terms=_term_map(node.get(REPLACE_KEY), REPLACE_KEY),
        )

    @classmethod
    def from_yaml(cls, text: str) -> "TermsConfig":
        """Parse a YAML or JSON configuration document."""
        try:
            node = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid configuration document: {exc}") from exc
        return cls.from_dict(node)

    @classmethod
    def from_file(cls, path: str | Path) -> "TermsConfig":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
        return cls.from_yaml(text)

    def merged(self, other: "TermsConfig") -> "TermsConfig":
        """Return a config with ``other``'s terms layered over this one's."""
        return TermsConfig(
            append_terms={**self.append_terms, **other.append_terms},
            replace_terms={**self.replace_terms, **other.replace_terms},
        )

    def to_dict(self) -> dict[str, dict[str, list[str]]]:
        return {
            APPEND_KEY: {k: list(v) for k, v in self.append_terms.items()},
            REPLACE_KEY: {k: list(v) for k, v in self.replace_terms.items()},
        }

    def build(self, builtins: TermMap = BUILT_IN_NONINCLUSIVE_TERMS) -> TermTable:
        """Resolve this configuration into a ``TermTable``."""
        return build_term_table(builtins, self.append_terms, self.replace_terms)
