"""Keyword based moderation of user supplied text."""

from __future__ import annotations

from typing import Final

from .errors import ContentBlockedError

BANNED_KEYWORDS: Final[tuple[str, ...]] = (
    "abuse",
    "harass",
    "hate",
    "kill",
    "suicide",
    "sexual",
    "porn",
    "nude",
    "fuck",
    "shit",
    "bakchod",
    "mc",
    "bc",
    "chutiya",
    "harami",
    "gaand",
    "madarchod",
    "bhosdi",
    "बेवकूफ",
    "गंदा",
    "गाली",
    "मूर्ख",
    "कुत्ता",
    "कमीना",
    "साला",
)


def detect_abuse(text: str) -> list[str]:
    """Return the banned keywords contained in ``text``.

    Matching is a case-insensitive substring test, so short terms also match
    inside longer words.
    """

    normalized = text.lower()
    return [keyword for keyword in BANNED_KEYWORDS if keyword.lower() in normalized]


def ensure_clean_content(text: str) -> None:
    """Raise :class:`ContentBlockedError` when ``text`` contains banned terms."""

    blocked = detect_abuse(text)
    if blocked:
        raise ContentBlockedError(blocked)


__all__ = ["BANNED_KEYWORDS", "detect_abuse", "ensure_clean_content"]
