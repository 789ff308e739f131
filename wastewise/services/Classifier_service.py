from typing import Optional, Sequence, Tuple

from wastewise.models.waste_model import WasteCategory

RECYCLABLE_KEYWORDS = ("plastic bottle", "bottle", "can", "paper", "plastic", "glass", "metal")
HAZARDOUS_KEYWORDS = ("battery", "electronics", "chemical", "paint")
DONATABLE_KEYWORDS = ("clothes", "furniture", "book")
ORGANIC_KEYWORDS = ("food", "organic")

# Order is the tie-break priority when a label hits more than one table
KEYWORD_TABLES: Tuple[Tuple[WasteCategory, Tuple[str, ...]], ...] = (
    (WasteCategory.RECYCLABLE, RECYCLABLE_KEYWORDS),
    (WasteCategory.HAZARDOUS, HAZARDOUS_KEYWORDS),
    (WasteCategory.DONATABLE, DONATABLE_KEYWORDS),
    (WasteCategory.ORGANIC, ORGANIC_KEYWORDS),
)

ALL_KEYWORDS = tuple(keyword for _, keywords in KEYWORD_TABLES for keyword in keywords)


def _contains_any(label: str, keywords: Sequence[str]) -> bool:
    return any(keyword in label for keyword in keywords)


def find_matching_label(labels: Sequence[str]) -> Optional[str]:
    """First label, in input order, containing any known keyword."""
    return next((label for label in labels if _contains_any(label, ALL_KEYWORDS)), None)


def classify_labels(labels: Sequence[str]) -> WasteCategory:
    """
    Maps detected labels to a waste category.

    Works in two phases: pick the first label that contains any keyword at all,
    then test that label against each table in priority order. The category is
    therefore decided by table priority, not by which keyword made the label
    match (a label containing both "paint" and "can" is Recyclable).

    Matching is a case-sensitive substring test, so labels should be lowercased.
    """
    matched = find_matching_label(labels)
    if matched is None:
        return WasteCategory.GENERAL_WASTE

    for category, keywords in KEYWORD_TABLES:
        if _contains_any(matched, keywords):
            return category
    return WasteCategory.GENERAL_WASTE
