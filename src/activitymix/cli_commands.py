"""
CLI Command Definitions.
Contains all Click command definitions and decorators.
"""

import click
from . import __version__


# Main CLI group
@click.group()
@click.version_option(__version__)
@click.option("--log-level", type=click.Choice(["none", "error", "debug"]), help="Set the log level")
def cli(log_level):
    """activitymix: classify learning activities into pedagogical modes."""
    from .core.logging import setup_logging
    from .core.settings import LogLevel, BackendSettings

    if log_level:
        # Override setting for this run and update persistent setting
        lvl = LogLevel(log_level)
        BackendSettings.set_log_level(lvl)
        setup_logging(lvl)
    else:
        setup_logging()


@cli.command("analyze")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--column", "column_key", default=None, help="Header of the activity title column (default: activity_title)")
@click.option("--videos", default=None, help="Number of synthetic videos to add to Present")
@click.option("--format", "output_format", default="table", type=click.Choice(["table", "json", "csv"]), help="Output format")
@click.option("--show-log", is_flag=True, help="Print the per-row classification log")
@click.option("--output", "output_path", type=click.Path(dir_okay=False, writable=True), help="Write output to a file instead of stdout")
def analyze(file_path, column_key, videos, output_format, show_log, output_path):
    """Classify the activities listed in a CSV file."""
    from .cli_handlers import handle_analyze
    handle_analyze(file_path, column_key, videos, output_format, show_log, output_path)


@cli.command("taxonomy")
@click.option("--format", "output_format", default="table", type=click.Choice(["table", "json"]), help="Output format")
def taxonomy(output_format):
    """List the activity taxonomy and the shared activities."""
    from .cli_handlers import handle_taxonomy
    handle_taxonomy(output_format)


@cli.group()
def settings():
    """View or change persisted settings."""
    pass


@settings.command("show")
def show_settings():
    """Show the current settings."""
    from .cli_handlers import handle_show_settings
    handle_show_settings()


@settings.command("set-column")
@click.argument("column_key")
def set_column(column_key):
    """Set the default activity title column."""
    from .cli_handlers import handle_set_column
    handle_set_column(column_key)


def main():
    cli()


if __name__ == "__main__":
    main()
