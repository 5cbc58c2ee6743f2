"""Tests for title translation and the translator factory."""

import asyncio

import httpx
import pytest

from toal_news.config import TranslateConfig
from toal_news.core.types import Article
from toal_news.errors import TranslationError
from toal_news.translate import (
    GoogleTranslator,
    Translator,
    available_translators,
    create_translator,
    translate_articles,
)


class UpperTranslator(Translator):
    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    async def translate(self, text: str) -> str:
        self.calls.append(text)
        if text in self.fail_on:
            raise TranslationError("boom")
        return text.upper()


def _google(handler) -> GoogleTranslator:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleTranslator(TranslateConfig(), client=client)


def test_translate_articles_keeps_original_title():
    articles = [
        Article(title="hello", url="https://x/1", date="d1"),
        Article(title="world", url="https://x/2"),
    ]
    translator = UpperTranslator()
    result = asyncio.run(translate_articles(articles, translator))

    assert [a.title for a in result] == ["HELLO", "WORLD"]
    assert [a.original_title for a in result] == ["hello", "world"]
    assert result[0].date == "d1"
    assert translator.calls == ["hello", "world"]


def test_translate_articles_falls_back_per_article():
    articles = [
        Article(title="good", url="https://x/1"),
        Article(title="bad", url="https://x/2"),
        Article(title="fine", url="https://x/3"),
    ]
    result = asyncio.run(translate_articles(articles, UpperTranslator(fail_on={"bad"})))

    assert [a.title for a in result] == ["GOOD", "bad", "FINE"]
    assert [a.original_title for a in result] == ["good", "bad", "fine"]


def test_google_translator_joins_segments():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(
            200,
            json=[[["こんにちは。", "Hello.", None, None], ["世界", "World", None, None]], None, "en"],
        )

    translator = _google(handler)
    assert asyncio.run(translator.translate("Hello. World")) == "こんにちは。世界"
    assert seen["client"] == "gtx"
    assert seen["sl"] == "en"
    assert seen["tl"] == "ja"
    assert seen["q"] == "Hello. World"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="error"),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"unexpected": True}),
        httpx.Response(200, json=[[]]),
    ],
)
def test_google_translator_errors_raise_translation_error(response):
    translator = _google(lambda request: response)
    with pytest.raises(TranslationError):
        asyncio.run(translator.translate("Hello"))


def test_google_translator_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(TranslationError, match="ConnectError"):
        asyncio.run(_google(handler).translate("Hello"))


def test_available_translators():
    assert available_translators() == ["google", "none"]


def test_create_translator_google():
    translator = create_translator(TranslateConfig(provider="Google"))
    assert isinstance(translator, GoogleTranslator)
    asyncio.run(translator.aclose())


def test_create_translator_disabled_or_none():
    assert create_translator(TranslateConfig(provider="none")) is None
    assert create_translator(TranslateConfig(enabled=False)) is None


def test_create_translator_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported translator"):
        create_translator(TranslateConfig(provider="deepl"))
