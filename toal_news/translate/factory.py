"""Translator factory and registry."""

from __future__ import annotations

import httpx

from ..config import TranslateConfig
from .base import Translator
from .google import GoogleTranslator


_TRANSLATOR_REGISTRY: dict[str, type[Translator] | None] = {
    "google": GoogleTranslator,
    "none": None,
}


def available_translators() -> list[str]:
    """Return the registered translator names."""
    return sorted(_TRANSLATOR_REGISTRY.keys())


def create_translator(
    cfg: TranslateConfig, client: httpx.AsyncClient | None = None
) -> Translator | None:
    """Build a translator from runtime config.

    Returns None when translation is disabled or the "none" backend is
    selected; sources flagged for translation then keep their titles.
    """
    name = cfg.provider.lower().strip()
    if name not in _TRANSLATOR_REGISTRY:
        supported = ", ".join(available_translators())
        raise ValueError(f"Unsupported translator: {cfg.provider}. Supported: {supported}")
    builder = _TRANSLATOR_REGISTRY[name]
    if not cfg.enabled or builder is None:
        return None
    return builder(cfg, client)
