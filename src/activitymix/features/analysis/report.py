"""
Serializable views of an analysis result for the CLI and external renderers.
"""

from io import StringIO
from typing import Dict, List

import pandas as pd
from pydantic import BaseModel, Field

from .aggregator import category_totals
from .models import AnalysisResult


class PercentageSliceModel(BaseModel):
    """One category share of the percentage series."""
    name: str
    value: float = Field(description="Percentage rounded to one decimal place; may be negative")


class AnalysisReport(BaseModel):
    """Full analysis output, keyed by category name."""
    total_activities: int
    category_counts: Dict[str, int]
    activity_counts: Dict[str, int]
    categorized_activities: Dict[str, Dict[str, int]]
    category_totals: Dict[str, int] = Field(description="Sum of nested activity counts per category")
    percentages: List[PercentageSliceModel]
    audit_log: str = ""

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisReport":
        return cls(
            total_activities=result.total_activities,
            category_counts={category.value: count for category, count in result.category_counts.items()},
            activity_counts=dict(result.activity_counts),
            categorized_activities={
                category.value: dict(activities)
                for category, activities in result.categorized_activities.items()
            },
            category_totals={
                category.value: total
                for category, total in category_totals(result.categorized_activities).items()
            },
            percentages=[
                PercentageSliceModel(name=entry.name, value=entry.value)
                for entry in result.percentages
            ],
            audit_log=result.audit_log,
        )


def report_to_json(result: AnalysisResult, include_log: bool = True) -> str:
    """Serialize a result as indented JSON."""
    report = AnalysisReport.from_result(result)
    exclude = None if include_log else {"audit_log"}
    return report.model_dump_json(indent=2, exclude=exclude)


def breakdown_dataframe(result: AnalysisResult) -> pd.DataFrame:
    """Flatten the categorized activities into category, activity, count rows."""
    rows = [
        (category.value, activity, count)
        for category, activities in result.categorized_activities.items()
        for activity, count in activities.items()
    ]
    return pd.DataFrame(rows, columns=["category", "activity", "count"])


def breakdown_to_csv(result: AnalysisResult) -> str:
    """Export the activity breakdown as CSV text."""
    csv_buffer = StringIO()
    breakdown_dataframe(result).to_csv(csv_buffer, index=False)
    return csv_buffer.getvalue()
