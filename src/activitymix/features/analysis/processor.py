"""
Activity Analysis Processor

Main entry point for analysis operations: parses raw text, classifies the
extracted labels and aggregates them into an AnalysisResult. Any failure
aborts the whole run; no partial result is returned.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .aggregator import compute_percentages
from .classifier import ActivityClassifier
from .exceptions import MalformedInputError
from .models import AnalysisResult
from .parser import parse
from ...core.config import DEFAULT_COLUMN_KEY, DEFAULT_ENCODING

logger = logging.getLogger(__name__)


class ActivityAnalysisProcessor:
    """Runs the parse, classify and aggregate stages."""

    def __init__(self, column_key: Optional[str] = None, classifier: Optional[ActivityClassifier] = None):
        """
        Initialize the processor.

        Args:
            column_key: Header of the activity title column (defaults to activity_title)
            classifier: Classifier to use (defaults to the static taxonomy)
        """
        self.column_key = column_key or DEFAULT_COLUMN_KEY
        self.classifier = classifier or ActivityClassifier()

    def analyze_text(self, raw_text: str) -> AnalysisResult:
        """
        Analyze the full contents of a delimited text file.

        Args:
            raw_text: File contents

        Returns:
            AnalysisResult for the file

        Raises:
            MissingColumnError: If the title column is absent
            MalformedInputError: If the input is empty
        """
        labels = parse(raw_text, self.column_key)
        outcome = self.classifier.classify(labels)
        total = outcome.classified_count
        percentages = compute_percentages(
            outcome.category_counts, outcome.categorized_activities, total
        )

        logger.info(f"Analysis complete: {total} activities from {len(labels)} labels")
        return AnalysisResult(
            category_counts=outcome.category_counts,
            activity_counts=outcome.activity_counts,
            categorized_activities=outcome.categorized_activities,
            percentages=percentages,
            total_activities=total,
            audit_log=outcome.audit_log,
        )

    def analyze_file(self, file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> AnalysisResult:
        """
        Read a file and analyze its contents.

        Raises:
            MalformedInputError: If the file cannot be read or decoded
        """
        path = Path(file_path)
        try:
            raw_text = path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Could not decode file as {encoding}: {e.reason}", str(path)) from e
        except OSError as e:
            raise MalformedInputError(f"Could not read file: {e.strerror or e}", str(path)) from e

        logger.debug(f"Read {len(raw_text)} characters from {path}")
        return self.analyze_text(raw_text)


def analyze_text(raw_text: str, column_key: str = DEFAULT_COLUMN_KEY) -> AnalysisResult:
    """Analyze raw text with the default classifier."""
    return ActivityAnalysisProcessor(column_key=column_key).analyze_text(raw_text)
