"""
Static activity taxonomy.

Maps each pedagogical mode to the activity names that belong to it. The
declaration order of both the categories and their activities is part of the
matching contract: equal-length substring matches resolve to whichever entry
is encountered first.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


class Category(str, Enum):
    """Classification buckets, in display order."""
    PRESENT = "Present"
    PRACTICE = "Practice"
    PRODUCE = "Produce"
    PARTICIPATE = "Participate"
    OTHER = "Other"


TAXONOMY: Mapping[Category, Tuple[str, ...]] = MappingProxyType({
    Category.PRESENT: (
        "Explanatory text", "Information box", "Reading", "Video player", "Reveal",
        "Text reveal", "Audio", "Interactive video", "Image swap", "Podcast", "Video",
    ),
    Category.PRACTICE: (
        "Question", "Formative quiz", "Quick answer check", "Multi quick answer check",
        "Ordering", "Interactive table", "Drag and Drop", "Image drag and drop",
        "Drag and drop table", "Gap fill", "Poll", "Quiz", "Simulation",
    ),
    Category.PRODUCE: (
        "File upload", "Summative quiz", "Participation grade", "Journal",
        "Video Submission", "Assignment", "Sticky note", "Whiteboard", "Image tile",
        "Coursework",
    ),
    Category.PARTICIPATE: (
        "Live class", "Geotagging", "Sticky note", "Whiteboard", "Image tile",
        "Bubblecloud", "Wordcloud", "Forum", "Live Tutorial", "Poll",
    ),
})

# Activities that also credit Participate when matched under another category
SHARED_ACTIVITIES: Tuple[str, ...] = ("Sticky note", "Whiteboard", "Image tile", "Poll")

# Nested counts halved when computing percentages; Participate is discounted by all of them
SHARED_DISCOUNTS: Mapping[Category, Tuple[str, ...]] = MappingProxyType({
    Category.PRACTICE: ("Poll",),
    Category.PRODUCE: ("Sticky note", "Whiteboard", "Image tile"),
})

# Titles containing this phrase are not activities
IGNORED_PHRASE = "learning outcomes"

# Fallback rules for titles with no taxonomy match: (keyword, category, rule name)
CUSTOM_RULES: Tuple[Tuple[str, Category, str], ...] = (
    ("coursework", Category.PRODUCE, "Coursework"),
    ("simulation", Category.PRACTICE, "Simulation"),
)

# Activity injected by the synthetic video count
SYNTHETIC_ACTIVITY = "Video"


def empty_category_tally() -> Dict[Category, int]:
    """Zeroed tally with one entry per category, in display order."""
    return {category: 0 for category in Category}


def empty_categorized_activities() -> Dict[Category, Dict[str, int]]:
    """Empty nested activity maps, one per category, in display order."""
    return {category: {} for category in Category}


def taxonomy_as_dict() -> Dict[str, list]:
    """Plain-JSON view of the taxonomy, keyed by category name."""
    return {category.value: list(activities) for category, activities in TAXONOMY.items()}
