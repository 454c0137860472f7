"""
app.py
──────
Farm Twin Monitor: status board entry point.

Startup sequence:
  1. Configure logging from settings
  2. Load a store snapshot (JSON file argument) or simulate one
  3. Classify every section and print the status board and alerts

Usage:
    python app.py                    # simulated snapshot
    python app.py snapshot.json      # snapshot exported from the realtime store
    python app.py snapshot.json en   # English messages
"""
import json
import logging
import sys
from pathlib import Path

from config.sensors import SENSOR_FIELDS
from config.settings import settings
from farmtwin.analytics.alerts import classify_section, generate_alerts, overall_severity
from farmtwin.data.simulator import generate_snapshot

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("farmtwin")


def load_snapshot(path: str | None) -> dict:
    if path is None:
        logger.info("No snapshot given, simulating one (seed=%s)", settings.SIMULATION_SEED)
        return generate_snapshot()
    with open(Path(path), encoding="utf-8") as f:
        return json.load(f)


def main(argv: list[str]) -> int:
    # ── 2. Snapshot ───────────────────────────────────────────────────────────
    path = argv[1] if len(argv) > 1 else None
    lang = argv[2] if len(argv) > 2 else None
    snapshot = load_snapshot(path)

    # ── 3. Status board ───────────────────────────────────────────────────────
    for domain in SENSOR_FIELDS:
        section = snapshot.get(domain.value)
        if not section:
            continue
        print(f"[{domain.value}]")
        for key, result in classify_section(domain, section, lang=lang).items():
            print(f"  {key:<18} {section.get(key)!s:>10} {result.level.value:<8} {result.target:<24} {result.message}")

    alerts = generate_alerts(snapshot, lang=lang)
    severity = overall_severity(alerts)
    print(f"\nOverall: {severity.value}")
    for alert in alerts:
        print(f"  ({alert.severity.value}) {alert.title}: {alert.detail}")

    logger.info("Classified %d sections, %d alerts", len(snapshot), len(alerts))
    return 0


# ── Run ───────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(main(sys.argv))
