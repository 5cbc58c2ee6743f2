"""Translator backed by the public Google Translate web endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from ..config import TranslateConfig
from ..errors import TranslationError
from .base import Translator


class GoogleTranslator(Translator):
    """Translate text through translate.googleapis.com (client=gtx).

    The endpoint answers with nested JSON arrays; the first element holds
    one [translated, original, ...] segment per sentence.
    """

    def __init__(
        self,
        cfg: TranslateConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.cfg = cfg
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(cfg.timeout_seconds),
            headers={"User-Agent": "Mozilla/5.0"},
        )

    async def translate(self, text: str) -> str:
        params = {
            "client": "gtx",
            "sl": self.cfg.source_lang,
            "tl": self.cfg.target_lang,
            "dt": "t",
            "q": text,
        }
        try:
            resp = await self._client.get(self.cfg.endpoint, params=params)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TranslationError(f"{type(exc).__name__}: {exc}") from exc
        return _join_segments(data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _join_segments(data: Any) -> str:
    try:
        translated = "".join(segment[0] for segment in data[0] if segment and segment[0])
    except (TypeError, IndexError, KeyError) as exc:
        raise TranslationError(f"Unexpected response shape: {exc}") from exc
    if not translated:
        raise TranslationError("Empty translation")
    return translated
