"""
farmtwin/analytics/alerts.py
─────────────────────────────
Dashboard-level aggregation of per-metric classifications.

Provides:
  - classify_section : classify every known field of one store section
  - generate_alerts  : alert list for a full store snapshot
  - overall_severity : headline severity of an alert list
  - card_tone        : dominant tone of a monitoring card
  - offline_domains  : monitored sections with no usable reading
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime

from config.alerts import LEVEL_TO_SEVERITY, SEVERITY_ORDER, AlertSeverity, Level
from config.sensors import MONITORED_DOMAINS, SENSOR_FIELDS, SensorField
from config.settings import settings
from config.thresholds import Domain
from farmtwin.analytics.classifier import Classifier, default_classifier
from farmtwin.data.models import ClassificationResult, StatusAlert
from farmtwin.data.normalize import is_missing, to_num
from farmtwin.i18n.translator import t

Snapshot = Mapping[str, Mapping[str, object] | None]


def _extras_for(field: SensorField, section: Mapping[str, object]) -> dict[str, float]:
    return {extras_key: to_num(section.get(store_key)) for extras_key, store_key in field.companions}


def classify_section(
    domain: Domain,
    section: Mapping[str, object],
    classifier: Classifier | None = None,
    lang: str | None = None,
) -> dict[str, ClassificationResult]:
    """Classify each known field of a store section, keyed by store field name."""
    clf = classifier or default_classifier
    results: dict[str, ClassificationResult] = {}
    for field in SENSOR_FIELDS.get(domain, ()):
        if field.key not in section:
            continue
        value = to_num(section[field.key])
        results[field.key] = clf.classify(domain, field.metric, value, _extras_for(field, section), lang=lang)
    return results


def _as_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    return ts.replace(tzinfo=UTC) if ts.tzinfo is None else ts


def is_stale(last_update: datetime | None, now: datetime | None = None, max_age_s: int | None = None) -> bool:
    """True when the last store update is older than `max_age_s` seconds."""
    if last_update is None:
        return False
    now = _as_utc(now or datetime.now(tz=UTC))
    last_update = _as_utc(last_update)
    max_age = settings.STALE_AFTER_S if max_age_s is None else max_age_s
    return (now - last_update).total_seconds() > max_age


def generate_alerts(
    snapshot: Snapshot,
    last_update: datetime | None = None,
    now: datetime | None = None,
    classifier: Classifier | None = None,
    lang: str | None = None,
) -> list[StatusAlert]:
    """
    Build the dashboard alert list for a store snapshot.

      - monitored section missing      → danger, "data not available"
      - finite reading not at "ok"     → its own level, with the result message
      - last update older than limit   → danger, "data not up to date"
      - nothing to report              → a single info alert
    Only monitored sections are checked. An empty section counts as present;
    missing readings inside a present section do not raise alerts.
    """
    alerts: list[StatusAlert] = []

    for domain in MONITORED_DOMAINS:
        if snapshot.get(domain.value) is None:
            alerts.append(StatusAlert(
                id=f"{domain.value}-missing",
                severity=AlertSeverity.DANGER,
                title=t("alerts.missing.title", lang, domain=t(f"domain.{domain.value}", lang)),
                detail=t("alerts.missing.detail", lang, path=domain.value),
                domain=domain.value,
            ))

    for domain in MONITORED_DOMAINS:
        section = snapshot.get(domain.value)
        if not section:
            continue
        fields = SENSOR_FIELDS[domain]
        results = classify_section(domain, section, classifier, lang)
        for key, result in results.items():
            if is_missing(section.get(key)) or result.level == Level.OK:
                continue
            metric = next(f.metric for f in fields if f.key == key)
            alerts.append(StatusAlert(
                id=f"{domain.value}-{metric.value}",
                severity=LEVEL_TO_SEVERITY[result.level],
                title=t(
                    "alerts.param.title", lang,
                    domain=t(f"domain.{domain.value}", lang),
                    metric=metric.value.replace("_", " "),
                ),
                detail=result.message,
                domain=domain.value,
                metric=metric.value,
            ))

    if is_stale(last_update, now):
        alerts.append(StatusAlert(
            id="data-stale",
            severity=AlertSeverity.DANGER,
            title=t("alerts.stale.title", lang),
            detail=t("alerts.stale.detail", lang, seconds=settings.STALE_AFTER_S),
        ))

    if not alerts:
        alerts.append(StatusAlert(
            id="ok",
            severity=AlertSeverity.INFO,
            title=t("alerts.all_ok.title", lang),
            detail=t("alerts.all_ok.detail", lang),
        ))

    return sorted(alerts, key=lambda a: SEVERITY_ORDER[AlertSeverity(a.severity)], reverse=True)


def overall_severity(alerts: Iterable[StatusAlert]) -> AlertSeverity:
    """Highest severity in `alerts`; info for an empty list."""
    worst = AlertSeverity.INFO
    for alert in alerts:
        severity = AlertSeverity(alert.severity)
        if SEVERITY_ORDER[severity] > SEVERITY_ORDER[worst]:
            worst = severity
    return worst


def card_tone(results: Iterable[ClassificationResult], raw_values: Iterable[object]) -> str:
    """
    Dominant tone of a monitoring card.

    Returns: "danger" | "warning" | "ok" | "neutral"
    """
    levels = [Level(r.level) for r in results]
    has_missing = any(is_missing(v) for v in raw_values)

    if has_missing and all(lv in (Level.UNKNOWN, Level.DANGER) for lv in levels):
        return "danger"
    if has_missing:
        return "warning"
    if all(lv == Level.OK for lv in levels):
        return "ok"
    if any(lv in (Level.WARNING, Level.DANGER) for lv in levels):
        return "warning"
    return "neutral"


def offline_domains(snapshot: Snapshot) -> list[Domain]:
    """Monitored sections that are absent or hold no usable reading."""
    offline: list[Domain] = []
    for domain in MONITORED_DOMAINS:
        section = snapshot.get(domain.value) or {}
        if not any(not math.isnan(to_num(v)) for v in section.values()):
            offline.append(domain)
    return offline
