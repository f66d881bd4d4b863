"""
INPUT VALIDATION
================
Allowlist check plus the combined search-term validation pipeline.
"""

# FLOW:
# - validate_allowlist() enforces a full-match regex allowlist.
# - check_search_term() runs empty -> allowlist -> XSS -> SQL and stops at
#   the first failing stage.
# HOW:
# - Returns a Verdict describing which stage rejected the term (if any).

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from Security.denylist import DenyRule
from Security.metrics import record_filter_event
from Security.sql_injection import find_sql_rule, validate_sql_injection
from Security.xss_protection import find_xss_rule, validate_xss


# Letters, digits and spaces only, 1 to 100 characters.
SEARCH_TERM_PATTERN = r"[A-Za-z0-9 ]{1,100}"


def validate_allowlist(value: str | None, pattern: str) -> str | None:
    if value is None or not isinstance(value, str):
        return None
    if not re.fullmatch(pattern, value):
        return None
    return value


@dataclass(frozen=True)
class Verdict:
    accepted: bool
    stage: Optional[str] = None
    rule: Optional[DenyRule] = None

    @property
    def reason(self) -> str:
        if self.accepted:
            return "accepted"
        if self.rule is not None:
            return f"{self.stage}:{self.rule.kind.value}"
        return self.stage or "rejected"


ACCEPTED = Verdict(accepted=True)


def check_search_term(term: object) -> Verdict:
    if not term or not isinstance(term, str):
        return Verdict(accepted=False, stage="empty")

    if validate_allowlist(term, SEARCH_TERM_PATTERN) is None:
        record_filter_event("allowlist", "block")
        return Verdict(accepted=False, stage="allowlist")
    record_filter_event("allowlist", "pass")

    if not validate_xss(term):
        return Verdict(accepted=False, stage="xss", rule=find_xss_rule(term))
    if not validate_sql_injection(term):
        return Verdict(accepted=False, stage="sql", rule=find_sql_rule(term))
    return ACCEPTED
