"""
Activity Analysis Module

Classifies learning-activity titles into the Present, Practice, Produce and
Participate modes (plus Other) and derives the percentage breakdown.

Main Components:
- ActivityAnalysisProcessor: Main entry point, parse -> classify -> aggregate
- parse / split_rows: Tabular text parsing and label extraction
- ActivityClassifier: Rule-based taxonomy matching
- compute_percentages / add_synthetic_videos: Aggregation
- AnalysisReport: Serializable result view
"""

from .taxonomy import Category, TAXONOMY, SHARED_ACTIVITIES
from .exceptions import AnalysisError, ParseError, MissingColumnError, MalformedInputError
from .models import Label, ClassificationDecision, ClassificationOutcome, PercentageSlice, AnalysisResult
from .parser import parse, split_rows
from .classifier import ActivityClassifier
from .aggregator import compute_percentages, add_synthetic_videos, category_totals
from .audit import AuditLog
from .processor import ActivityAnalysisProcessor, analyze_text
from .report import AnalysisReport, report_to_json, breakdown_dataframe, breakdown_to_csv

__all__ = [
    'Category',
    'TAXONOMY',
    'SHARED_ACTIVITIES',
    'AnalysisError',
    'ParseError',
    'MissingColumnError',
    'MalformedInputError',
    'Label',
    'ClassificationDecision',
    'ClassificationOutcome',
    'PercentageSlice',
    'AnalysisResult',
    'parse',
    'split_rows',
    'ActivityClassifier',
    'compute_percentages',
    'add_synthetic_videos',
    'category_totals',
    'AuditLog',
    'ActivityAnalysisProcessor',
    'analyze_text',
    'AnalysisReport',
    'report_to_json',
    'breakdown_dataframe',
    'breakdown_to_csv',
]
