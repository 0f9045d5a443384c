"""
Activity analysis models and data structures.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .taxonomy import Category, empty_categorized_activities, empty_category_tally


@dataclass(frozen=True)
class Label:
    """One normalized activity title and the source row it came from."""
    text: str
    row_number: int


@dataclass
class ClassificationDecision:
    """Outcome of classifying a single label."""
    label: Label
    category: Optional[Category]
    activity: Optional[str]
    rule: str  # exact, substring, custom, fallback or ignored
    shared: bool = False

    @property
    def ignored(self) -> bool:
        return self.rule == "ignored"


@dataclass
class PercentageSlice:
    """One entry of the percentage series."""
    name: str
    value: float


@dataclass
class ClassificationOutcome:
    """Tallies produced by one classification pass."""
    category_counts: Dict[Category, int] = field(default_factory=empty_category_tally)
    activity_counts: Dict[str, int] = field(default_factory=dict)
    categorized_activities: Dict[Category, Dict[str, int]] = field(default_factory=empty_categorized_activities)
    decisions: List[ClassificationDecision] = field(default_factory=list)
    audit_log: str = ""

    @property
    def classified_count(self) -> int:
        """Number of labels that were not ignored."""
        return sum(1 for decision in self.decisions if not decision.ignored)


@dataclass
class AnalysisResult:
    """
    Full output of one parse and classify pass.

    The only supported mutation after creation is synthetic video injection.
    A single writer is assumed; callers sharing a result across threads must
    serialize access themselves.
    """
    category_counts: Dict[Category, int]
    activity_counts: Dict[str, int]
    categorized_activities: Dict[Category, Dict[str, int]]
    percentages: List[PercentageSlice]
    total_activities: int
    audit_log: str = ""

    def add_synthetic_videos(self, count: Union[int, str]) -> bool:
        """Add ``count`` synthetic videos to Present and recompute the percentages."""
        from .aggregator import add_synthetic_videos
        return add_synthetic_videos(self, count)

    def percentage_of(self, category: Category) -> float:
        for entry in self.percentages:
            if entry.name == category.value:
                return entry.value
        raise KeyError(category.value)
