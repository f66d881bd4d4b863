"""
XSS PROTECTION
==============
Denylist classifier for cross-site scripting payloads.
"""

# FLOW:
# - validate_xss() scans the input against XSS_RULES in order.
# WHY:
# - Rejects obvious script injection before a term reaches the results page.
# HOW:
# - First matching rule marks the input unsafe. Encoded payloads are matched
#   as-is, never decoded, so double encoding slips through.

from __future__ import annotations

from typing import Optional

from Security.denylist import DenyRule, ThreatKind, first_match, is_safe, rule
from Security.metrics import record_filter_event


XSS_RULES: tuple[DenyRule, ...] = (
    # Script tags
    rule(ThreatKind.SCRIPT_TAG, r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>"),
    rule(ThreatKind.SCRIPT_TAG, r"<script[\s\S]*?>"),
    # Event handler attributes
    rule(ThreatKind.EVENT_HANDLER, r"on\w+\s*=\s*[\"'][^\"']*[\"']"),
    rule(ThreatKind.EVENT_HANDLER, r"on\w+\s*=\s*[^>\s]+"),
    # Script-scheme URLs
    rule(ThreatKind.SCRIPT_URL, r"javascript\s*:"),
    rule(ThreatKind.SCRIPT_URL, r"vbscript\s*:"),
    rule(ThreatKind.SCRIPT_URL, r"data\s*:"),
    rule(ThreatKind.DANGEROUS_TAG, r"<(iframe|object|embed|form|img|svg|math|details|marquee)"),
    # Style injection
    rule(ThreatKind.STYLE_INJECTION, r"<style[\s\S]*?>"),
    rule(ThreatKind.STYLE_INJECTION, r"style\s*=\s*[\"'][^\"']*[\"']"),
    # Common payload calls
    rule(ThreatKind.CALL_PATTERN, r"alert\s*\("),
    rule(ThreatKind.CALL_PATTERN, r"confirm\s*\("),
    rule(ThreatKind.CALL_PATTERN, r"prompt\s*\("),
    rule(ThreatKind.CALL_PATTERN, r"eval\s*\("),
    rule(ThreatKind.CALL_PATTERN, r"document\.(cookie|domain|location)"),
    rule(ThreatKind.CALL_PATTERN, r"window\.(location|open)"),
    # Entity and percent encoding
    rule(ThreatKind.ENCODED_PAYLOAD, r"&#x[0-9a-f]+;"),
    rule(ThreatKind.ENCODED_PAYLOAD, r"&#[0-9]+;"),
    rule(ThreatKind.ENCODED_PAYLOAD, r"%[0-9a-f]{2}"),
    rule(ThreatKind.CSS_EXPRESSION, r"expression\s*\("),
    rule(ThreatKind.CSS_EXPRESSION, r"@import"),
    rule(ThreatKind.META_REFRESH, r"<meta[\s\S]*?refresh"),
)


def find_xss_rule(value: object) -> Optional[DenyRule]:
    return first_match(XSS_RULES, value)


def validate_xss(value: object) -> bool:
    """Return True when ``value`` is a non-empty string matching no XSS rule."""
    safe = is_safe(XSS_RULES, value)
    record_filter_event("xss", "pass" if safe else "block")
    return safe


__all__ = ["XSS_RULES", "find_xss_rule", "validate_xss"]
