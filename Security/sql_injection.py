"""
SQL INJECTION DETECTION
=======================
Denylist classifier for SQL injection payloads in search input.

FLOW:
- validate_sql_injection() scans the input against SQL_RULES in order.

WHY:
- The search term is echoed back and could be forwarded to a query layer.

HOW:
- First matching rule marks the input unsafe. Keyword rules use word
  boundaries; the error-based function rule does not, so words such as
  "expert" are rejected as well.
"""

from __future__ import annotations

import re
from typing import Optional

from Security.denylist import DenyRule, ThreatKind, first_match, is_safe, rule
from Security.metrics import record_filter_event


SQL_RULES: tuple[DenyRule, ...] = (
    rule(ThreatKind.SQL_KEYWORD, r"\b(SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|ALTER|EXEC|EXECUTE|UNION|OR|AND)\b"),
    rule(ThreatKind.SQL_COMMENT, r"(--|#|/\*|\*/)", flags=re.ASCII),
    # OR 1=1, AND 1=1, OR 'a'='a'
    rule(ThreatKind.TAUTOLOGY, r"\bOR\b\s+\b\d+\s*=\s*\d+"),
    rule(ThreatKind.TAUTOLOGY, r"\bAND\b\s+\b\d+\s*=\s*\d+"),
    rule(ThreatKind.TAUTOLOGY, r"\bOR\b\s+['\"]\w+['\"]?\s*=\s*['\"]\w+['\"]?"),
    rule(ThreatKind.QUOTE_BREAKOUT, r"'\s*(OR|AND)\s*'"),
    rule(ThreatKind.QUOTE_BREAKOUT, r"'\s*;\s*", flags=re.ASCII),
    rule(ThreatKind.QUOTE_BREAKOUT, r"'\s*(UNION|SELECT)"),
    rule(ThreatKind.HEX_LITERAL, r"0x[0-9a-f]+"),
    rule(ThreatKind.TIMING_FUNCTION, r"\b(SLEEP|BENCHMARK|WAITFOR|DELAY)\b"),
    rule(ThreatKind.SCHEMA_PROBE, r"(information_schema|sysobjects|syscolumns)"),
    rule(ThreatKind.STACKED_QUERY, r";\s*(SELECT|INSERT|UPDATE|DELETE|DROP)"),
    rule(ThreatKind.WILDCARD_PROBE, r"\bLIKE\b\s*['\"][%_]"),
    rule(ThreatKind.TIMING_FUNCTION, r"(SLEEP\s*\(|WAITFOR\s+DELAY|BENCHMARK\s*\()"),
    rule(ThreatKind.ERROR_FUNCTION, r"(EXTRACTVALUE|UPDATEXML|EXP|CAST)"),
    rule(ThreatKind.CONDITIONAL, r"\bIF\b\s*\("),
    rule(ThreatKind.QUOTE_BREAKOUT, r"'{2,}", flags=re.ASCII),
    rule(ThreatKind.SUBQUERY, r"\(\s*(SELECT|INSERT|UPDATE|DELETE)"),
)


def find_sql_rule(value: object) -> Optional[DenyRule]:
    return first_match(SQL_RULES, value)


def validate_sql_injection(value: object) -> bool:
    """Return True when ``value`` is a non-empty string matching no SQL rule."""
    safe = is_safe(SQL_RULES, value)
    record_filter_event("sql", "pass" if safe else "block")
    return safe
