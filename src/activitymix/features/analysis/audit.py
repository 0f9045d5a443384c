"""
Human-readable trace of classification decisions.
"""

from typing import Dict, List

from .models import Label
from .taxonomy import Category


class AuditLog:
    """Sequential log with one line per classified or ignored row."""

    def __init__(self):
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)

    def append(self, line: str):
        self._lines.append(line)

    def record_ignored(self, label: Label):
        self.append(f'Row {label.row_number}: "{label.text}" ignored (Learning outcomes)')

    def record_match(self, label: Label, category: Category, activity: str):
        self.append(f'Row {label.row_number}: "{label.text}" categorized as {category.value} ({activity})')

    def record_custom_rule(self, label: Label, category: Category, rule_name: str):
        self.append(
            f'Row {label.row_number}: "{label.text}" categorized as {category.value} '
            f'(Custom Rule - {rule_name})'
        )

    def record_other(self, label: Label):
        self.append(f'Row {label.row_number}: "{label.text}" categorized as Other')

    def record_summary(self, category_counts: Dict[Category, int]):
        """Close the log with the counts the percentage formula starts from."""
        self.append("")
        self.append("Before pie chart calculation:")
        self.append(f"Produce count: {category_counts[Category.PRODUCE]}")
        self.append(f"Participate count: {category_counts[Category.PARTICIPATE]}")
