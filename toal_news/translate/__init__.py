"""
Title translation.

Translation is best-effort: titles are translated one at a time and a
failed translation keeps the original title.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Sequence

from ..core.types import Article
from ..errors import TranslationError
from ..logging_utils import log_event
from .base import Translator
from .factory import available_translators, create_translator
from .google import GoogleTranslator

__all__ = [
    "Translator",
    "GoogleTranslator",
    "available_translators",
    "create_translator",
    "translate_articles",
]


async def translate_articles(
    articles: Sequence[Article],
    translator: Translator,
    logger: logging.Logger | None = None,
) -> list[Article]:
    """Translate article titles sequentially.

    Every returned article carries original_title set to its pre-translation
    title. When a translation fails the title is left unchanged.
    """
    translated: list[Article] = []
    for article in articles:
        try:
            title = await translator.translate(article.title)
        except TranslationError as exc:
            log_event(
                logger,
                "Translation failed",
                level=logging.WARNING,
                event="translate_failed",
                url=article.url,
                title=article.title,
                error=str(exc),
            )
            title = article.title
        translated.append(replace(article, title=title, original_title=article.title))
    return translated
