"""
config/sensors.py
─────────────────
Realtime store layout: which field of each domain section feeds which metric.

Store snapshots look like:
    {"kolam": {"suhu": 28.1, "ph": "7.9", "oksigen": "-", "amonia": 0.4}, ...}

Companion readings are passed to the classifier as extras, keyed by the
extras name the composite/UIA logic expects.
"""
from dataclasses import dataclass

from config.thresholds import Domain, Metric


@dataclass(frozen=True)
class SensorField:
    key: str                                      # field name in the store section
    metric: Metric
    companions: tuple[tuple[str, str], ...] = ()  # (extras key, store field)


SENSOR_FIELDS: dict[Domain, tuple[SensorField, ...]] = {
    Domain.KOLAM: (
        SensorField("suhu", Metric.SUHU),
        SensorField("ph", Metric.PH),
        SensorField("oksigen", Metric.OKSIGEN),
        SensorField("amonia", Metric.AMONIA_TOTAL, companions=(("ph", "ph"), ("suhu", "suhu"))),
    ),
    Domain.ULAT: (
        SensorField("suhu", Metric.SUHU),
        SensorField("ph", Metric.PH),
        SensorField("oksigen", Metric.OKSIGEN),
        SensorField("amonia", Metric.AMONIA_TOTAL),
    ),
    Domain.KANDANG: (
        SensorField("suhu", Metric.SUHU, companions=(("kelembaban", "kelembaban"),)),
        SensorField("kelembaban", Metric.KELEMBABAN),
        SensorField("kualitas_udara", Metric.AMONIA),
        SensorField("pencahayaan", Metric.INTENSITAS_CAHAYA),
    ),
    Domain.HIDROPONIK: (
        SensorField("ph", Metric.PH),
        SensorField("suhu", Metric.SUHU),
        SensorField("kelembaban", Metric.KELEMBABAN),
        SensorField("intensitas_cahaya", Metric.INTENSITAS_CAHAYA),
        SensorField("aliran_nutrisi", Metric.EC),
    ),
    Domain.USAGE: (
        SensorField("energy", Metric.ENERGY),
        SensorField("water", Metric.WATER),
        SensorField("efficiency", Metric.EFFICIENCY),
    ),
}

# Sections the dashboard expects to be online
MONITORED_DOMAINS: tuple[Domain, ...] = (
    Domain.KOLAM,
    Domain.HIDROPONIK,
    Domain.KANDANG,
    Domain.ULAT,
)
