"""
Spanish lexicon tables for diary mood analysis.

Static word sets grouped by sentiment tier, emotion category, intensity
modifier and negation. All tables are immutable and built once at import.

Usage:
    from src.sentiment.lexicon import TIER_LOOKUP, get_tier_weight

    get_tier_weight("excelente")  # Returns 2
    get_tier_weight("mal")        # Returns -1
    get_tier_weight("mesa")       # Returns 0
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Sentiment tiers in lookup order: a word keeps the weight of the first tier
# that lists it.
SENTIMENT_TIERS: Tuple[Tuple[str, int, frozenset], ...] = (
    ("very_positive", 2, frozenset({
        "excelente", "increíble", "fantástico", "maravilloso", "extraordinario",
        "perfecto", "genial", "espectacular", "fabuloso", "brillante",
        "magnífico", "sensacional", "estupendo", "excepcional", "radiante",
        "eufórico", "entusiasmado", "emocionado", "felicísimo", "encantado",
        "asombroso", "impresionante", "deslumbrante", "sublime", "divino",
    })),
    ("positive", 1, frozenset({
        "bueno", "bien", "feliz", "contento", "alegre", "satisfecho",
        "agradable", "positivo", "optimista", "esperanzado", "tranquilo",
        "confiado", "motivado", "inspirado", "agradecido", "afortunado",
        "sonriente", "jovial", "animado", "próspero", "exitoso",
        "útil", "valioso", "efectivo", "eficaz", "práctico", "gracias",
    })),
    ("negative", -1, frozenset({
        "mal", "malo", "triste", "deprimido", "desanimado", "preocupado",
        "ansioso", "estresado", "frustrado", "molesto", "irritado",
        "cansado", "agotado", "aburrido", "confundido", "perdido",
        "solo", "vacío", "decepcionado", "nervioso", "inquieto",
        "inseguro", "temeroso", "problemático", "difícil", "inútil",
    })),
    ("very_negative", -2, frozenset({
        "terrible", "horrible", "pésimo", "desesperado", "devastado",
        "furioso", "enojado", "odioso", "detestable", "repugnante",
        "insoportable", "doloroso", "sufriendo", "miserable", "infeliz",
        "catastrófico", "desastroso", "fatal", "nefasto", "abominable",
    })),
)

# Emotion keyword sets; a word may belong to several emotions
EMOTION_KEYWORDS: Mapping[str, frozenset] = MappingProxyType({
    "joy": frozenset({"risa", "sonrisa", "diversión", "humor", "celebrar", "alegría"}),
    "sadness": frozenset({"llorar", "lágrimas", "pena", "melancolía", "tristeza", "dolor"}),
    "anger": frozenset({"enojo", "rabia", "ira", "furia", "molestia", "irritación"}),
    "fear": frozenset({"miedo", "terror", "pánico", "temor", "ansiedad", "nervios"}),
    "surprise": frozenset({"sorpresa", "asombro", "shock", "inesperado", "increíble"}),
    "love": frozenset({"amor", "cariño", "afecto", "ternura", "pasión", "romance"}),
})

EMOTIONS: Tuple[str, ...] = tuple(EMOTION_KEYWORDS)

INTENSIFIERS_HIGH = frozenset({"muy", "mucho", "bastante", "demasiado", "extremadamente", "súper"})
INTENSIFIERS_LOW = frozenset({"poco", "algo", "ligeramente", "apenas", "casi"})

NEGATORS = frozenset({"no", "nunca", "jamás", "tampoco", "nada", "nadie", "ningún", "sin"})


def _build_tier_lookup() -> Mapping[str, int]:
    lookup: Dict[str, int] = {}
    for _, weight, words in SENTIMENT_TIERS:
        for word in words:
            lookup.setdefault(word, weight)
    return MappingProxyType(lookup)


# word -> tier weight (+2, +1, -1, -2)
TIER_LOOKUP: Mapping[str, int] = _build_tier_lookup()


def get_tier_weight(word: str) -> int:
    """
    Get the sentiment tier weight for a single normalized word.

    Returns:
        +2/+1 for very positive/positive, -1/-2 for negative/very negative,
        0 if the word is in no tier.
    """
    return TIER_LOOKUP.get(word, 0)


def get_tier_sizes() -> Dict[str, int]:
    """Get the number of words in each sentiment tier."""
    return {name: len(words) for name, _, words in SENTIMENT_TIERS}
