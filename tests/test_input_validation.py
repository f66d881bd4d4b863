"""Tests for the allowlist and the combined search term pipeline."""

import pytest

from Security.denylist import ThreatKind
from Security.input_validation import SEARCH_TERM_PATTERN, Verdict, check_search_term, validate_allowlist


class TestAllowlist:
    @pytest.mark.parametrize("term", ["hello world", "A1 b2 C3", "x" * 100, " "])
    def test_letters_digits_and_spaces_are_allowed(self, term):
        assert validate_allowlist(term, SEARCH_TERM_PATTERN) == term

    @pytest.mark.parametrize(
        "term",
        ["", "x" * 101, "hello-world", "héllo", "hello\n", "tab\there", "<b>"],
    )
    def test_other_input_is_rejected(self, term):
        assert validate_allowlist(term, SEARCH_TERM_PATTERN) is None

    def test_none_is_rejected(self):
        assert validate_allowlist(None, SEARCH_TERM_PATTERN) is None


class TestCheckSearchTerm:
    def test_plain_term_is_accepted(self):
        verdict = check_search_term("hello world")
        assert verdict.accepted is True
        assert verdict.stage is None
        assert verdict.reason == "accepted"

    @pytest.mark.parametrize("term", [None, "", 7])
    def test_empty_input_stops_first(self, term):
        verdict = check_search_term(term)
        assert verdict == Verdict(accepted=False, stage="empty")

    def test_allowlist_runs_before_denylists(self):
        verdict = check_search_term("<script>alert(1)</script>")
        assert verdict.accepted is False
        assert verdict.stage == "allowlist"
        assert verdict.rule is None

    def test_sql_keyword_is_rejected(self):
        verdict = check_search_term("select name from users")
        assert verdict.stage == "sql"
        assert verdict.rule.kind == ThreatKind.SQL_KEYWORD
        assert verdict.reason == "sql:sql-keyword"

    def test_substring_function_rule_rejects_ordinary_word(self):
        verdict = check_search_term("expert")
        assert verdict.stage == "sql"
        assert verdict.rule.kind == ThreatKind.ERROR_FUNCTION
