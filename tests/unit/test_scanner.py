"""Unit tests for termlint.validator.scanner."""
from __future__ import annotations

from termlint.text.index import LocationKind, TextInstance
from termlint.validator.scanner import TermMatch, find_term, scan
from termlint.validator.terms import build_term_table


def _ns(text: str) -> TextInstance:
    return TextInstance(text=text, location_kind=LocationKind.NAMESPACE)


class TestFindTerm:
    def test_exact(self) -> None:
        assert find_term("master", "master") == "master"

    def test_preserves_original_case(self) -> None:
        assert find_term("MasterRecord", "master") == "Master"

    def test_upper_case_term(self) -> None:
        assert find_term("is_master", "MASTER") == "master"

    def test_mixed_case_inside(self) -> None:
        assert find_term("theBlackList", "blacklist") == "BlackList"

    def test_first_occurrence(self) -> None:
        assert find_term("master_MASTER", "master") == "master"
        assert find_term("MASTER_master", "master") == "MASTER"

    def test_no_match(self) -> None:
        assert find_term("primary", "master") is None

    def test_empty_term(self) -> None:
        assert find_term("anything", "") is None

    def test_regex_characters_are_literal(self) -> None:
        assert find_term("a.b", "a.b") == "a.b"
        assert find_term("axb", "a.b") is None


class TestScan:
    def test_no_match_is_empty(self) -> None:
        table = build_term_table()
        assert scan(_ns("example.weather"), table) == []

    def test_single_match(self) -> None:
        table = build_term_table(replace_terms={"master": ["primary"]})
        assert scan(_ns("MasterRecord"), table) == [TermMatch("master", "Master")]

    def test_repeated_term_reported_once(self) -> None:
        table = build_term_table(replace_terms={"slave": ["replica"]})
        assert scan(_ns("slave_to_slave"), table) == [TermMatch("slave", "slave")]

    def test_multiple_terms_follow_table_order(self) -> None:
        table = build_term_table()
        matches = scan(_ns("whitelist of master and slave"), table)
        assert matches == [
            TermMatch("master", "master"),
            TermMatch("slave", "slave"),
            TermMatch("whitelist", "whitelist"),
        ]

    def test_overlapping_terms_both_reported(self) -> None:
        table = build_term_table(replace_terms={"black": [], "blacklist": ["denyList"]})
        matches = scan(_ns("Blacklisted"), table)
        assert [m.term for m in matches] == ["black", "blacklist"]
        assert [m.matched_text for m in matches] == ["Black", "Blacklist"]

    def test_deterministic(self) -> None:
        table = build_term_table()
        instance = _ns("master.slave.whitelist")
        assert scan(instance, table) == scan(instance, table)

    def test_accepts_plain_mapping(self) -> None:
        assert scan(_ns("foo"), {"foo": ["bar"]}) == [TermMatch("foo", "foo")]
