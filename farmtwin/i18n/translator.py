"""
farmtwin/i18n/translator.py
────────────────────────────
Simple translation engine using JSON locale files.

Usage:
    from farmtwin.i18n.translator import t, set_lang

    t("level.ok")                         # → "Dalam rentang optimal." (id)
    t("alerts.stale.title", lang="en")    # → "Data is not up to date"
    t("alerts.param.title", domain="Kolam Ikan", metric="suhu")
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from config.settings import settings

_LOCALES_DIR = Path(__file__).parent / "locales"
SUPPORTED_LANGS = ("id", "en")
_FALLBACK_LANG = "id"
_current_lang: str = settings.DEFAULT_LANG if settings.DEFAULT_LANG in SUPPORTED_LANGS else _FALLBACK_LANG


@lru_cache(maxsize=4)
def _load_locale(lang: str) -> dict:
    path = _LOCALES_DIR / f"{lang}.json"
    if not path.exists():
        path = _LOCALES_DIR / f"{_FALLBACK_LANG}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def set_lang(lang: str) -> None:
    """Set the active language (module-level default)."""
    global _current_lang
    _current_lang = lang if lang in SUPPORTED_LANGS else _FALLBACK_LANG


def get_lang() -> str:
    return _current_lang


def t(key: str, /, lang: str | None = None, **params: object) -> str:
    """
    Translate a dot-separated key.

    Args:
        key: Dot-separated path, e.g. "level.warning" or "alerts.stale.title"
        lang: Language override; uses module default if None
        **params: Values substituted into the template with str.format

    Returns:
        Translated string, or the key itself if not found.
    """
    locale = _load_locale(lang or _current_lang)
    node: dict | str = locale
    for part in key.split("."):
        if isinstance(node, dict):
            node = node.get(part, key)
        else:
            return key
    if not isinstance(node, str):
        return key
    return node.format(**params) if params else node
