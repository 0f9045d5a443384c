"""
Rule-based activity classifier.

Each label is matched against the taxonomy, case-insensitively. An exact
match ends the search at once; otherwise the longest activity name contained
in the label wins, and equal lengths go to the first one encountered. Labels
with no match fall through the custom keyword rules and finally to Other,
keyed by their own text. Matched activities that belong to the shared set are
also credited to Participate.
"""

import logging
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .audit import AuditLog
from .models import ClassificationDecision, ClassificationOutcome, Label
from .taxonomy import (
    CUSTOM_RULES,
    IGNORED_PHRASE,
    SHARED_ACTIVITIES,
    TAXONOMY,
    Category,
)

logger = logging.getLogger(__name__)


class ActivityClassifier:
    """Assigns every label to exactly one primary category."""

    def __init__(
        self,
        taxonomy: Mapping[Category, Sequence[str]] = TAXONOMY,
        shared_activities: Sequence[str] = SHARED_ACTIVITIES,
    ):
        self.taxonomy = taxonomy
        self.shared_activities = tuple(shared_activities)

    def find_match(self, text: str) -> Optional[Tuple[Category, str, bool]]:
        """
        Find the best taxonomy entry for a label.

        Args:
            text: Label text

        Returns:
            (category, activity, exact) or None when nothing matches
        """
        lowered = text.lower()
        best: Optional[Tuple[Category, str, bool]] = None
        best_length = 0

        for category, activities in self.taxonomy.items():
            for activity in activities:
                candidate = activity.lower()
                if lowered == candidate:
                    return category, activity, True
                if candidate in lowered and len(activity) > best_length:
                    best_length = len(activity)
                    best = (category, activity, False)

        return best

    def is_shared(self, activity: str) -> bool:
        lowered = activity.lower()
        return any(shared.lower() in lowered for shared in self.shared_activities)

    def classify(self, labels: Iterable[Label]) -> ClassificationOutcome:
        """
        Classify labels in a single forward pass.

        Args:
            labels: Parsed labels in source order

        Returns:
            ClassificationOutcome with tallies, decisions and the audit log text
        """
        outcome = ClassificationOutcome()
        audit = AuditLog()

        for label in labels:
            decision = self._classify_label(label, outcome, audit)
            outcome.decisions.append(decision)
            logger.debug(
                f"Row {label.row_number}: {decision.rule} -> "
                f"{decision.category.value if decision.category else '-'} ({decision.activity})"
            )

        audit.record_summary(outcome.category_counts)
        outcome.audit_log = audit.text
        logger.info(
            f"Classified {outcome.classified_count} of {len(outcome.decisions)} labels"
        )
        return outcome

    def _classify_label(self, label: Label, outcome: ClassificationOutcome, audit: AuditLog) -> ClassificationDecision:
        lowered = label.text.lower()

        if IGNORED_PHRASE in lowered:
            audit.record_ignored(label)
            return ClassificationDecision(label=label, category=None, activity=None, rule="ignored")

        match = self.find_match(label.text)
        if match:
            category, activity, exact = match
            self._count(outcome, category, activity)
            audit.record_match(label, category, activity)
            shared = self.is_shared(activity)
            if shared:
                outcome.category_counts[Category.PARTICIPATE] += 1
                nested = outcome.categorized_activities[Category.PARTICIPATE]
                nested[activity] = nested.get(activity, 0) + 1
            return ClassificationDecision(
                label=label,
                category=category,
                activity=activity,
                rule="exact" if exact else "substring",
                shared=shared,
            )

        for keyword, category, rule_name in CUSTOM_RULES:
            if keyword in lowered:
                self._count(outcome, category, label.text)
                audit.record_custom_rule(label, category, rule_name)
                return ClassificationDecision(label=label, category=category, activity=label.text, rule="custom")

        self._count(outcome, Category.OTHER, label.text)
        audit.record_other(label)
        return ClassificationDecision(label=label, category=Category.OTHER, activity=label.text, rule="fallback")

    @staticmethod
    def _count(outcome: ClassificationOutcome, category: Category, key: str):
        outcome.category_counts[category] += 1
        outcome.activity_counts[key] = outcome.activity_counts.get(key, 0) + 1
        nested = outcome.categorized_activities[category]
        nested[key] = nested.get(key, 0) + 1
