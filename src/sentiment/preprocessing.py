"""Text normalization for Spanish diary entries."""

import re
import unicodedata
from typing import Any, List

# Anything that is not a basic Latin letter, a Spanish accented vowel, ñ/ü
# or whitespace
_NON_WORD_PATTERN = re.compile(r"[^a-záéíóúüñ\s]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def clean_text(text: Any) -> str:
    """
    Lowercase text and strip everything except letters and whitespace.

    Args:
        text: Raw input (non-string values are treated as empty)

    Returns:
        Cleaned text with single spaces between words
    """
    if not isinstance(text, str) or not text:
        return ""

    # Decomposed accents (e.g. from macOS input) must match the composed lexicon
    composed = unicodedata.normalize("NFC", text)
    cleaned = _NON_WORD_PATTERN.sub(" ", composed.lower())
    return _WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def normalize(text: Any) -> List[str]:
    """
    Normalize raw text into an ordered token sequence.

    Duplicates are kept; token order matters for negation scope.

    Example:
        >>> normalize("¡Hoy fue un día EXCELENTE!")
        ['hoy', 'fue', 'un', 'día', 'excelente']
    """
    cleaned = clean_text(text)
    if not cleaned:
        return []
    return cleaned.split(" ")
