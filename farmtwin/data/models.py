"""
farmtwin/data/models.py
───────────────────────
Pydantic v2 models for classification results and dashboard alerts.
"""

from pydantic import BaseModel, ConfigDict

from config.alerts import AlertSeverity, Level


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: Level
    message: str
    target: str = "-"
    range: tuple[float, float] | None = None
    units: str = ""
    # Only set when the level was derived from computed un-ionized ammonia
    nh3_mgl: float | None = None
    f_nh3: float | None = None

    @property
    def is_ok(self) -> bool:
        return self.level == Level.OK


class StatusAlert(BaseModel):
    id: str
    severity: AlertSeverity
    title: str
    detail: str
    domain: str | None = None
    metric: str | None = None
