"""
Label ordering strategies.

Grouped rows are ordered by label. Japanese labels need a
collation that knows kana and kanji: katakana and hiragana of
the same sound sort together, voiced kana sort next to their
unvoiced base, and kanji follow the Japanese (JIS) order
rather than code point order.

"ja" uses ICU's Japanese collator (PyICU).
"ordinal" sorts by code point and suits deployments whose
labels are not Japanese.
"""

import logging
from functools import lru_cache
from typing import Callable

import icu

from sales_ledger.config import get_settings

logger = logging.getLogger(__name__)

JA = "ja"
ORDINAL = "ordinal"

# A collation maps a label to a sort key.
Collation = Callable[[str], tuple]


@lru_cache(maxsize=1)
def _ja_collator() -> icu.Collator:
    # Opening the collator loads the locale's tailoring; do it once.
    logger.debug("Loading ICU collator for locale %s", JA)
    return icu.Collator.createInstance(icu.Locale(JA))


def ja_collation(label: str) -> tuple:
    """Japanese locale key; equal keys fall back to code point order."""
    return (_ja_collator().getSortKey(label), label)


def ordinal_collation(label: str) -> tuple:
    return (label,)


def get_collation(name: str | None = None) -> Collation:
    """
    Return the collation registered under name.

    None selects the COLLATION setting.
    Raises ValueError for an unknown name.
    """
    if name is None:
        name = get_settings().COLLATION

    if name == JA:
        return ja_collation
    if name == ORDINAL:
        return ordinal_collation
    raise ValueError(f"Unknown collation '{name}'")


def sort_labels(labels, collation: Collation | None = None) -> list[str]:
    """Sort plain strings with the given (or configured) collation."""
    key = collation or get_collation()
    return sorted(labels, key=key)
