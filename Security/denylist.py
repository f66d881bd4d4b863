"""
DENYLIST RULES
==============
Shared building blocks for the pattern-based input classifiers.
"""

# FLOW:
# - Each classifier declares an ordered tuple of DenyRule entries.
# - first_match() walks the tuple and returns the first rule that hits.
# HOW:
# - Plain re.search() per rule; no decoding or normalization of the input.
# - Rules compile with re.ASCII: \b, \w and \d only know ASCII word characters.

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, NamedTuple, Optional


class ThreatKind(str, Enum):
    SCRIPT_TAG = "script-tag"
    EVENT_HANDLER = "event-handler"
    SCRIPT_URL = "script-url"
    DANGEROUS_TAG = "dangerous-tag"
    STYLE_INJECTION = "style-injection"
    CALL_PATTERN = "call-pattern"
    ENCODED_PAYLOAD = "encoded-payload"
    CSS_EXPRESSION = "css-expression"
    META_REFRESH = "meta-refresh"
    SQL_KEYWORD = "sql-keyword"
    SQL_COMMENT = "sql-comment"
    TAUTOLOGY = "tautology"
    QUOTE_BREAKOUT = "quote-breakout"
    HEX_LITERAL = "hex-literal"
    TIMING_FUNCTION = "timing-function"
    SCHEMA_PROBE = "schema-probe"
    STACKED_QUERY = "stacked-query"
    WILDCARD_PROBE = "wildcard-probe"
    ERROR_FUNCTION = "error-function"
    CONDITIONAL = "conditional"
    SUBQUERY = "subquery"


class DenyRule(NamedTuple):
    kind: ThreatKind
    pattern: re.Pattern

    def matches(self, value: str) -> bool:
        return self.pattern.search(value) is not None


def rule(kind: ThreatKind, pattern: str, flags: int = re.IGNORECASE | re.ASCII) -> DenyRule:
    return DenyRule(kind, re.compile(pattern, flags))


def first_match(rules: Iterable[DenyRule], value: object) -> Optional[DenyRule]:
    """Return the first rule matching ``value``, or None when nothing matches.

    Callers must reject non-string/empty input themselves; this only scans.
    """
    if not isinstance(value, str):
        return None
    for candidate in rules:
        if candidate.matches(value):
            return candidate
    return None


def is_safe(rules: Iterable[DenyRule], value: object) -> bool:
    if not value or not isinstance(value, str):
        return False
    return first_match(rules, value) is None
