"""Ingredient name normalization for matching."""

import re

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Synonym Table
# =============================================================================

# (variant, canonical) pairs, scanned in declaration order. Compound names come
# before the bare words they start with so that prefix matching keeps e.g.
# "tomato paste" apart from "tomatoes".
NAME_SYNONYMS: tuple[tuple[str, str], ...] = (
    # Compounds that must not collapse into their head word
    ("tomato paste", "tomato paste"),
    ("tomato puree", "tomato puree"),
    ("tomato sauce", "tomato sauce"),
    ("tomato ketchup", "ketchup"),
    ("onion powder", "onion powder"),
    ("garlic powder", "garlic powder"),
    ("ginger garlic paste", "ginger garlic paste"),
    ("chilli powder", "chili powder"),
    ("chile powder", "chili powder"),
    ("chili powder", "chili powder"),
    ("chilli flakes", "chili flakes"),
    ("chile flakes", "chili flakes"),
    ("potato starch", "potato starch"),
    ("coriander powder", "coriander powder"),
    ("coriander seeds", "coriander seeds"),
    ("coriander seed", "coriander seeds"),
    ("chana dal", "chana dal"),
    # Chili
    ("chillies", "chili"),
    ("chilies", "chili"),
    ("chilli", "chili"),
    ("chiles", "chili"),
    ("chile", "chili"),
    ("chili", "chili"),
    # Peppers
    ("capsicums", "bell pepper"),
    ("capsicum", "bell pepper"),
    ("bell peppers", "bell pepper"),
    # Onions
    ("spring onions", "green onion"),
    ("spring onion", "green onion"),
    ("scallions", "green onion"),
    ("scallion", "green onion"),
    ("green onions", "green onion"),
    ("onions", "onions"),
    ("onion", "onions"),
    # Asafoetida
    ("asafoetida", "hing"),
    ("asafetida", "hing"),
    ("heeng", "hing"),
    # Vegetables
    ("tomatoes", "tomatoes"),
    ("tomato", "tomatoes"),
    ("potatoes", "potatoes"),
    ("potato", "potatoes"),
    ("aubergines", "eggplant"),
    ("aubergine", "eggplant"),
    ("brinjals", "eggplant"),
    ("brinjal", "eggplant"),
    ("eggplants", "eggplant"),
    ("courgettes", "zucchini"),
    ("courgette", "zucchini"),
    ("ladies finger", "okra"),
    ("lady finger", "okra"),
    ("bhindi", "okra"),
    ("coriander leaves", "cilantro"),
    ("fresh coriander", "cilantro"),
    ("carrots", "carrots"),
    ("carrot", "carrots"),
    # Pulses
    ("garbanzo beans", "chickpeas"),
    ("garbanzo bean", "chickpeas"),
    ("garbanzos", "chickpeas"),
    ("chickpea", "chickpeas"),
    ("chana", "chickpeas"),
    ("kidney beans", "kidney beans"),
    ("kidney bean", "kidney beans"),
    ("rajma", "kidney beans"),
    # Dairy
    ("yoghurt", "yogurt"),
    ("curd", "yogurt"),
    ("dahi", "yogurt"),
    # Spices
    ("haldi", "turmeric"),
    ("jeera", "cumin"),
    ("cumin seeds", "cumin"),
    ("cumin seed", "cumin"),
)


# =============================================================================
# Normalization
# =============================================================================

_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")


def _lookup_exact(name: str) -> str | None:
    for variant, canonical in NAME_SYNONYMS:
        if name == variant:
            return canonical
    return None


def _lookup_prefix(name: str) -> str | None:
    for variant, canonical in NAME_SYNONYMS:
        if name.startswith(variant):
            return canonical
    return None


def strip_parentheticals(name: str) -> str:
    """Remove every parenthetical qualifier, e.g. "Garlic (paste or whole)" -> "Garlic"."""
    return _PARENTHETICAL.sub("", name).strip()


def has_parenthetical(name: str) -> bool:
    """Check whether a display name carries a parenthetical qualifier."""
    return _PARENTHETICAL.search(name) is not None


def normalize_name(raw: str) -> str:
    """
    Canonicalize an ingredient display name into a matching key.

    Steps, in order:
    1. Lower-case and trim.
    2. Exact lookup in NAME_SYNONYMS.
    3. Strip parenthetical qualifiers and trim again.
    4. Prefix scan of NAME_SYNONYMS in declaration order.

    Unmatched names are returned cleaned and lower-cased, so they act as their
    own key.
    """
    name = raw.lower().strip()

    canonical = _lookup_exact(name)
    if canonical is not None:
        return canonical

    cleaned = strip_parentheticals(name)

    canonical = _lookup_prefix(cleaned)
    if canonical is not None:
        logger.debug(f"Prefix match: {raw!r} -> {canonical!r}")
        return canonical

    return cleaned
