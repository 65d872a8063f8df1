"""
Text normalization utilities

This module turns raw playlist cell text into display text.
"""
import html

MISSING = "<missing>"


def normalize_text(value: str | None) -> str:
    """
    Unescape HTML entities and collapse whitespace

    Entities survive the HTML parser when the page escapes them twice
    (e.g. '&amp;amp;'), so one more unescape pass is applied here.

    Args:
        value: Raw cell text, possibly None

    Returns:
        Trimmed single-line text (empty string for None)
    """
    if value is None:
        return ""
    return " ".join(html.unescape(value).split())


def field_or_missing(value: str | None) -> str:
    """Return normalized text, or the missing-field sentinel if there is none"""
    return normalize_text(value) or MISSING
