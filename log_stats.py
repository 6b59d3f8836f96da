#!/usr/bin/env python3

"""
CLI tool to print traffic statistics for an Apache/Nginx access log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import polars as pl
from http_log_stats.stats import UnreadableLogFile, files_frame, get_stats, referers_frame


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def echo_table(title: str, df: pl.DataFrame, top: Optional[int]) -> None:
    """Print a titled Polars table, limited to its first ``top`` rows when given."""
    if top is not None:
        df = df.head(top)
    click.echo(click.style(title, bold=True))
    with pl.Config(tbl_rows=-1, fmt_str_lengths=120, tbl_hide_dataframe_shape=True):
        click.echo(str(df))


@click.command()
@click.argument(
    "log_file",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the full report as JSON",
)
@click.option(
    "--top",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Only show the first N paths and referers (first-seen order)",
)
@click.option(
    "--encoding",
    type=str,
    default="utf-8",
    help="Text encoding of the log file. Default: utf-8",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every skipped line",
)
def main(log_file: Path, as_json: bool, top: Optional[int], encoding: str, verbose: bool):
    """
    Parse a Combined Log Format file and print request, path and referer statistics.

    Example:
        python log_stats.py logs/access.log --top 10
    """
    setup_logging(verbose)

    try:
        report = get_stats(log_file, encoding=encoding)
    except UnreadableLogFile as e:
        click.echo(click.style(f"✗ Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if report is None:
        click.echo(click.style(f"⊘ No valid log entries found in {log_file}", fg="yellow"))
        return

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    count = report.count
    click.echo(f"Log file: {log_file}")
    click.echo(f"Total requests: {count.total_count}")
    click.echo(click.style(f"  success: {count.success} ({count.success_pct}%)", fg="green"))
    click.echo(click.style(f"  error:   {count.error} ({count.error_pct}%)", fg="red"))
    if report.bad_lines:
        click.echo(f"Bad lines skipped: {report.bad_lines}")
    click.echo()

    echo_table("Files", files_frame(report), top)
    click.echo()
    echo_table("Referers", referers_frame(report), top)


if __name__ == "__main__":
    main()
