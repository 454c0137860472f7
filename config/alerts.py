"""
config/alerts.py
────────────────
Status levels, alert severities, and their orderings.
"""

from enum import Enum


class Level(str, Enum):
    OK = "ok"
    WARNING = "warning"
    DANGER = "danger"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        return rank_of(self)


class AlertSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


# Level ordering for escalation (higher = more severe)
LEVEL_RANK: dict[str, int] = {
    Level.DANGER: 3,
    Level.WARNING: 2,
    Level.OK: 1,
    Level.UNKNOWN: 0,
}

# Severity ordering for sorting (higher = more severe)
SEVERITY_ORDER: dict[str, int] = {
    AlertSeverity.DANGER: 3,
    AlertSeverity.WARNING: 2,
    AlertSeverity.INFO: 1,
}

LEVEL_TO_SEVERITY: dict[str, AlertSeverity] = {
    Level.DANGER: AlertSeverity.DANGER,
    Level.WARNING: AlertSeverity.WARNING,
    Level.OK: AlertSeverity.INFO,
    Level.UNKNOWN: AlertSeverity.INFO,
}


def rank_of(level: Level | str) -> int:
    """Severity rank of a level given as a Level or its string value."""
    return LEVEL_RANK[Level(level)]
