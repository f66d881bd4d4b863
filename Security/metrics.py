"""
FILTER METRICS
==============
Prometheus-backed counters for the search input filters.
"""

from __future__ import annotations

from typing import Dict

from prometheus_client import Counter

from Security.security_config import SECURITY_SETTINGS


_FILTER_EVENTS = None

FILTERS = ("allowlist", "xss", "sql")
OUTCOMES = ("pass", "block")


def _enabled() -> bool:
    return bool(SECURITY_SETTINGS["PROMETHEUS_ENABLED"])


def _init_metrics() -> None:
    global _FILTER_EVENTS
    if _FILTER_EVENTS or not _enabled():
        return
    _FILTER_EVENTS = Counter(
        "search_filter_events_total",
        "Count of search input filter decisions",
        ["filter", "outcome"],
    )


def record_filter_event(filter_name: str, outcome: str, amount: int = 1) -> None:
    _init_metrics()
    if not _FILTER_EVENTS or not _enabled():
        return
    _FILTER_EVENTS.labels(filter=filter_name, outcome=outcome).inc(amount)


def _counter_value(counter, filter_name: str, outcome: str) -> int:
    try:
        return int(counter.labels(filter=filter_name, outcome=outcome)._value.get())
    except Exception:
        return 0


def get_filter_metrics_snapshot() -> Dict[str, Dict[str, int]]:
    _init_metrics()
    snapshot: Dict[str, Dict[str, int]] = {}
    for filter_name in FILTERS:
        snapshot[filter_name] = {
            outcome: _counter_value(_FILTER_EVENTS, filter_name, outcome) if _FILTER_EVENTS else 0
            for outcome in OUTCOMES
        }
    return snapshot
