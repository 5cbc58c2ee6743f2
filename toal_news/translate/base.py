"""
Abstract base class for title translators.

New backends should inherit from Translator and implement translate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Translator(ABC):
    """Abstract base class for translation backends.

    Implementations are treated as unreliable: any failure must be raised
    as TranslationError so callers can fall back to the original text.
    """

    @abstractmethod
    async def translate(self, text: str) -> str:
        """Translate a single piece of text.

        Args:
            text: Text in the configured source language

        Returns:
            Text in the configured target language

        Raises:
            TranslationError: The backend could not produce a translation
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any resources held by the translator."""
