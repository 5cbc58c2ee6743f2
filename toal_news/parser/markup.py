"""
Relaxed text matching over feed markup.

Feeds in the wild are frequently not well-formed XML, so instead of building
a tree these helpers match tags directly in the raw text:
- decode_entities: XML entities, character references and CDATA sections
- first_tag_content: inner text of the first occurrence of a tag
- all_blocks: every complete block of a repeated tag (item, entry)
- clean_text: decoded, tag-free, whitespace-collapsed text for display
"""

from __future__ import annotations

from functools import lru_cache
import re


_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}

_REFERENCE = r"&(?:#[xX](?P<hex>[0-9a-fA-F]+)|#(?P<dec>[0-9]+)|(?P<name>amp|lt|gt|quot|apos));"
_REFERENCE_RE = re.compile(_REFERENCE)
# CDATA and references share one alternation so each reference is decoded exactly once.
_ENTITY_RE = re.compile(r"<!\[CDATA\[(?P<cdata>.*?)\]\]>|" + _REFERENCE, re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_SPACE_RE = re.compile(r"\s+")


def decode_entities(text: str) -> str:
    """Decode XML entities and unwrap CDATA sections.

    Handles the five predefined entities, decimal (&#39;) and hexadecimal
    (&#x27;) character references. References to invalid code points are
    left untouched, as are unknown named entities. Feeds commonly wrap
    escaped HTML in CDATA, so references inside a CDATA section are decoded
    as well.

    Args:
        text: Raw markup text

    Returns:
        The decoded text. Never raises.

    Examples:
        >>> decode_entities("Tom &amp; Jerry &#x2764;")
        'Tom & Jerry ❤'
        >>> decode_entities("<![CDATA[<b>raw</b>]]>")
        '<b>raw</b>'
    """
    return _ENTITY_RE.sub(_replace_entity, text)


def _replace_entity(match: re.Match[str]) -> str:
    cdata = match.groupdict().get("cdata")
    if cdata is not None:
        return _REFERENCE_RE.sub(_replace_entity, cdata)
    name = match.group("name")
    if name is not None:
        return _NAMED_ENTITIES[name]
    hex_ref = match.group("hex")
    code = int(hex_ref, 16) if hex_ref is not None else int(match.group("dec"))
    # Surrogates cannot be encoded as UTF-8 when the digest is written.
    if 0xD800 <= code <= 0xDFFF:
        return match.group(0)
    try:
        return chr(code)
    except (ValueError, OverflowError):
        return match.group(0)


@lru_cache(maxsize=64)
def _tag_content_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    # (?<!/) rejects self-closing openers such as <link href="..."/>.
    return re.compile(
        rf"<{name}(?:\s[^>]*)?(?<!/)>(.*?)</{name}\s*>", re.IGNORECASE | re.DOTALL
    )


@lru_cache(maxsize=64)
def _block_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}[\s>].*?</{name}\s*>", re.IGNORECASE | re.DOTALL)


def first_tag_content(block: str, tag: str) -> str:
    """Return the trimmed inner text of the first <tag>...</tag> in block.

    Matching is case-insensitive, ignores attributes on the opening tag and
    stops at the nearest closing tag. Self-closing tags (<link/>) have no
    content and are skipped.

    Args:
        block: Markup to search
        tag: Tag name, may include a namespace prefix (e.g. "dc:date")

    Returns:
        Inner text without surrounding whitespace, or "" if absent
    """
    match = _tag_content_re(tag).search(block)
    return match.group(1).strip() if match else ""


def all_blocks(xml: str, tag: str) -> list[str]:
    """Return every complete <tag ...>...</tag> block in document order.

    Blocks keep their inner markup so callers can extract sub-tags. An
    unterminated opening tag is not matched; the scan is a single pass over
    the document.

    Args:
        xml: Full feed document
        tag: Repeated record tag ("item" or "entry")

    Returns:
        List of raw block strings, possibly empty
    """
    return [match.group(0) for match in _block_re(tag).finditer(xml)]


def strip_tags(raw: str) -> str:
    """Decode entities and CDATA, then remove every remaining tag."""
    return _TAG_RE.sub("", decode_entities(raw))


def clean_text(raw: str) -> str:
    """Turn a markup fragment into display text.

    Decodes entities and CDATA, strips remaining tags, collapses whitespace
    runs into single spaces and trims the result.
    """
    return _SPACE_RE.sub(" ", strip_tags(raw)).strip()
