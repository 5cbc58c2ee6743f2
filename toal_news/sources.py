"""
The fixed list of news sources aggregated into the digest.

Order here is the order sources appear on the page.
"""

from __future__ import annotations

from typing import Iterable

from .core.types import Source


SOURCES: tuple[Source, ...] = (
    Source(
        id="designboom",
        name="designboom",
        url="https://www.designboom.com/",
        feed_url="https://www.designboom.com/feed/",
        translate=True,
    ),
    Source(
        id="nhk",
        name="NHKニュース",
        url="https://www3.nhk.or.jp/news/",
        feed_url="https://www3.nhk.or.jp/rss/news/cat0.xml",
    ),
    Source(
        id="itmedia",
        name="ITmedia",
        url="https://www.itmedia.co.jp/",
        feed_url="https://rss.itmedia.co.jp/rss/2.0/itmedia_all.xml",
    ),
    Source(
        id="gigazine",
        name="GIGAZINE",
        url="https://gigazine.net/",
        feed_url="https://gigazine.net/news/rss_2.0/",
    ),
    Source(
        id="cnet",
        name="CNET Japan",
        url="https://japan.cnet.com/",
        feed_url="https://japan.cnet.com/rss/index.rdf",
    ),
    Source(
        id="impress",
        name="Impress Watch",
        url="https://www.watch.impress.co.jp/",
        feed_url="https://www.watch.impress.co.jp/data/rss/1.0/ipw/feed.rdf",
    ),
    Source(
        id="zenn",
        name="Zenn",
        url="https://zenn.dev/",
        feed_url="https://zenn.dev/feed",
    ),
    Source(
        id="hatena",
        name="はてなブックマーク IT",
        url="https://b.hatena.ne.jp/hotentry/it",
        feed_url="https://b.hatena.ne.jp/hotentry/it.rss",
    ),
    Source(
        id="publickey",
        name="Publickey",
        url="https://www.publickey1.jp/",
        feed_url="https://www.publickey1.jp/atom.xml",
    ),
    Source(
        id="google_trends",
        name="Google Trends",
        url="https://trends.google.co.jp/trending?geo=JP",
        feed_url="https://trends.google.co.jp/trending/rss?geo=JP",
    ),
)


def get_sources(ids: Iterable[str] | None = None) -> list[Source]:
    """Return the configured sources, optionally narrowed to the given ids.

    Selected sources keep their table order regardless of the order of ids.

    Raises:
        KeyError: An id does not name a configured source
    """
    if ids is None:
        return list(SOURCES)
    wanted = set(ids)
    unknown = wanted - {source.id for source in SOURCES}
    if unknown:
        raise KeyError(f"Unknown source id(s): {', '.join(sorted(unknown))}")
    return [source for source in SOURCES if source.id in wanted]
