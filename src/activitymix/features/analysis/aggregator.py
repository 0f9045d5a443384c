"""
Percentage aggregation for classified activities.

Shared activities are counted twice during classification, once under their
home category and once under Participate. When turning counts into
percentages, half of each shared count is removed from the home category and
from Participate. The resulting series is not forced to sum to 100 and may
contain negative values; both are expected.
"""

import logging
import math
from fractions import Fraction
from typing import Dict, List, Mapping, Optional, Union

from .models import AnalysisResult, PercentageSlice
from .taxonomy import SHARED_DISCOUNTS, SYNTHETIC_ACTIVITY, Category

logger = logging.getLogger(__name__)


def round1(share: Fraction) -> float:
    """Express a share as a percentage rounded to the nearest tenth, halves rounding up."""
    return math.floor(share * 1000 + Fraction(1, 2)) / 10


def shared_discounts(categorized: Mapping[Category, Mapping[str, int]]) -> Dict[Category, float]:
    """
    Amount to subtract from each category before normalizing.

    Args:
        categorized: Nested activity counts per category

    Returns:
        Discount per category; Participate carries the sum of all others
    """
    discounts = {category: 0.0 for category in Category}
    for category, activities in SHARED_DISCOUNTS.items():
        nested = categorized.get(category, {})
        for activity in activities:
            half = nested.get(activity, 0) / 2
            discounts[category] += half
            discounts[Category.PARTICIPATE] += half
    return discounts


def compute_percentages(
    category_counts: Mapping[Category, int],
    categorized: Mapping[Category, Mapping[str, int]],
    total_activities: int,
) -> List[PercentageSlice]:
    """
    Build the percentage series, one slice per category in display order.

    Args:
        category_counts: Primary and shared counts per category
        categorized: Nested activity counts per category
        total_activities: Number of activities the percentages are relative to

    Returns:
        List of PercentageSlice; all zero when there are no activities
    """
    discounts = shared_discounts(categorized)
    series = []
    for category in Category:
        if total_activities <= 0:
            value = 0.0
        else:
            adjusted = category_counts.get(category, 0) - discounts[category]
            value = round1(Fraction(adjusted) / total_activities)
        series.append(PercentageSlice(name=category.value, value=value))
    return series


def category_totals(categorized: Mapping[Category, Mapping[str, int]]) -> Dict[Category, int]:
    """Sum of nested counts per category, as shown in the breakdown headers."""
    return {category: sum(activities.values()) for category, activities in categorized.items()}


def _coerce_count(count) -> Optional[int]:
    if isinstance(count, bool):
        return None
    if isinstance(count, int):
        return count
    if isinstance(count, str):
        digits = count.strip()
        if digits.isascii() and digits.isdecimal():
            return int(digits)
        return None
    return None


def add_synthetic_videos(result: Optional[AnalysisResult], count: Union[int, str]) -> bool:
    """
    Add ``count`` videos to Present and recompute the percentage series in place.

    Args:
        result: Result of a previous analysis
        count: Positive number of videos, as an int or numeric string

    Returns:
        True when the result was updated, False when the call was a no-op
    """
    if result is None:
        logger.debug("No analysis result to add videos to")
        return False

    videos = _coerce_count(count)
    if videos is None or videos <= 0:
        logger.debug(f"Ignoring invalid video count: {count!r}")
        return False

    result.category_counts[Category.PRESENT] += videos
    present = result.categorized_activities[Category.PRESENT]
    present[SYNTHETIC_ACTIVITY] = present.get(SYNTHETIC_ACTIVITY, 0) + videos
    result.total_activities += videos
    result.percentages = compute_percentages(
        result.category_counts, result.categorized_activities, result.total_activities
    )
    logger.info(f"Added {videos} synthetic videos, total activities now {result.total_activities}")
    return True
