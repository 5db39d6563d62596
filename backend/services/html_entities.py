"""Decode HTML entities that Torre.ai leaves in names, headlines and bios."""

import html


def decode_html_entities(text: str) -> str:
    """Decode named (``&amp;``) and numeric (``&#39;``, ``&#x27;``) entities.

    ``&nbsp;`` becomes a plain space rather than U+00A0.
    """
    if not text:
        return text
    return html.unescape(text).replace("\xa0", " ")


def safe_decode_html_entities(text: str | None) -> str | None:
    return None if text is None else decode_html_entities(text)
