"""
CLI Command Handlers.
Contains all the implementation logic for CLI commands.
"""

import click
import json
from pathlib import Path

from .core.logging import get_logger

logger = get_logger(__name__)


def _format_table(result, show_log):
    from .features.analysis import category_totals

    lines = [f"Total number of activities: {result.total_activities}", ""]
    lines.append(f"{'Category':<14} {'Percent':>8}")
    lines.append("-" * 23)
    for entry in result.percentages:
        lines.append(f"{entry.name:<14} {entry.value:>7.1f}%")

    lines.append("")
    lines.append("Activity Breakdown")
    totals = category_totals(result.categorized_activities)
    for category, activities in result.categorized_activities.items():
        lines.append(f"{category.value} ({totals[category]})")
        for activity, count in activities.items():
            lines.append(f"  - {activity}: {count}")

    if show_log:
        lines.append("")
        lines.append("Analysis Log")
        lines.append(result.audit_log.rstrip("\n"))
    return "\n".join(lines) + "\n"


def handle_analyze(file_path, column_key, videos, output_format, show_log, output_path):
    """Handle the analyze command."""
    from .core.config import ALLOWED_EXTENSIONS
    from .core.settings import BackendSettings
    from .features.analysis import ActivityAnalysisProcessor, AnalysisError, breakdown_to_csv, report_to_json

    file_ext = Path(file_path).suffix.lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise click.BadParameter(
            f"Unsupported file type: {file_ext or '(none)'}. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )

    column_key = column_key or BackendSettings.get_column_key()

    try:
        processor = ActivityAnalysisProcessor(column_key=column_key)
        result = processor.analyze_file(file_path)
    except AnalysisError as e:
        logger.error(f"Analysis of {file_path} failed: {e}")
        click.echo(f"❌ Error processing input: {e.message}", err=True)
        raise click.Abort()

    if videos is not None and not result.add_synthetic_videos(videos):
        click.echo(f"⚠️ Ignoring invalid video count: {videos}", err=True)

    if output_format == "json":
        output = report_to_json(result, include_log=show_log) + "\n"
    elif output_format == "csv":
        output = breakdown_to_csv(result)
    else:
        output = _format_table(result, show_log)

    if output_path:
        try:
            Path(output_path).write_text(output, encoding="utf-8")
        except OSError as e:
            click.echo(f"❌ Could not write {output_path}: {e}", err=True)
            raise click.Abort()
        click.echo(f"✅ Wrote {output_format} output to {output_path}")
    else:
        click.echo(output, nl=False)


def handle_taxonomy(output_format):
    """Handle the taxonomy listing command."""
    from .features.analysis.taxonomy import SHARED_ACTIVITIES, TAXONOMY, taxonomy_as_dict

    if output_format == "json":
        payload = {"taxonomy": taxonomy_as_dict(), "shared_activities": list(SHARED_ACTIVITIES)}
        click.echo(json.dumps(payload, indent=2))
        return

    for category, activities in TAXONOMY.items():
        click.echo(f"{category.value} ({len(activities)}):")
        for activity in activities:
            marker = " *" if activity in SHARED_ACTIVITIES else ""
            click.echo(f"  - {activity}{marker}")
    click.echo("* also counted toward Participate")


def handle_show_settings():
    """Handle the settings show command."""
    from .core.settings import BackendSettings
    from .storage.database import get_db_path

    click.echo(f"Settings database: {get_db_path()}")
    click.echo(f"Log level: {BackendSettings.get_log_level().value}")
    click.echo(f"Column key: {BackendSettings.get_column_key()}")


def handle_set_column(column_key):
    """Handle the settings set-column command."""
    from .core.settings import BackendSettings

    if not column_key.strip():
        raise click.BadParameter("Column key cannot be empty")
    if not BackendSettings.set_setting("column_key", column_key.strip()):
        click.echo("❌ Could not save setting: settings database unavailable", err=True)
        raise click.Abort()
    click.echo(f"✅ Default column set to '{column_key.strip()}'")
