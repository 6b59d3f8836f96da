"""
Traffic statistics for a single access log file.

get_stats() makes one sequential pass over the file, feeds every line to the
parser and folds the valid records into overall, per-path and per-referer
counts. Percentages are rounded half-up to three decimals and returned as text.
"""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Dict, Optional, Union

import polars as pl
from http_log_stats.model import (
    CountStats,
    FileStats,
    LogRecord,
    RefererStats,
    StatsReport,
)
from http_log_stats.parser import parse_log_line


logger = logging.getLogger(__name__)

PCT_QUANTUM = Decimal("0.001")

FILES_SCHEMA = {"path": pl.Utf8, "visits": pl.Int64, "visited_pct": pl.Utf8}
REFERERS_SCHEMA = {"referer": pl.Utf8, "requests": pl.Int64, "request_pct": pl.Utf8}


class UnreadableLogFile(OSError):
    """Raised when a log file is missing or cannot be opened or read."""


def format_pct(part: int, total: int) -> str:
    """
    Return ``part`` as a percentage of ``total``, rounded half-up to three places.

    Example: format_pct(2, 3) -> "66.667"
    """
    pct = Decimal(part * 100) / Decimal(total)
    return str(pct.quantize(PCT_QUANTUM, rounding=ROUND_HALF_UP))


@dataclass
class _Aggregation:
    """Running counts for one pass. Dicts keep first-seen key order."""

    total: int = 0
    success: int = 0
    bad_lines: int = 0
    files: Dict[str, int] = field(default_factory=dict)
    referers: Dict[str, int] = field(default_factory=dict)

    def add(self, record: LogRecord) -> None:
        self.total += 1
        # Only the first character counts: "2", "200" and "2xx" are all successes
        if record.status[:1] == "2":
            self.success += 1
        self.files[record.path] = self.files.get(record.path, 0) + 1
        self.referers[record.referer] = self.referers.get(record.referer, 0) + 1

    def report(self) -> StatsReport:
        error = self.total - self.success
        count = CountStats(
            total_count=self.total,
            success=self.success,
            error=error,
            success_pct=format_pct(self.success, self.total),
            error_pct=format_pct(error, self.total),
        )
        files = [
            FileStats(path=path, visits=visits, visited_pct=format_pct(visits, self.total))
            for path, visits in self.files.items()
        ]
        referers = [
            RefererStats(
                referer=referer,
                requests=requests,
                request_pct=format_pct(requests, self.total),
            )
            for referer, requests in self.referers.items()
        ]
        return StatsReport(
            count=count,
            files=files,
            referers=referers,
            bad_lines=self.bad_lines,
        )


def get_stats(filename: Union[str, Path], encoding: str = "utf-8") -> Optional[StatsReport]:
    """
    Parse a log file and aggregate its traffic statistics.

    Args:
        filename: Path to the access log file
        encoding: Text encoding of the file; undecodable bytes are replaced

    Returns:
        A StatsReport, or None when the file holds no valid log lines

    Raises:
        UnreadableLogFile: if the file is missing or cannot be opened or read
    """
    filepath = Path(filename)
    state = _Aggregation()

    try:
        # Split on "\n" only; a bare "\r" inside a field stays part of the line
        with open(filepath, "r", encoding=encoding, errors="replace", newline="\n") as f:
            for line_num, line in enumerate(f, start=1):
                record = parse_log_line(line)
                if record is None:
                    state.bad_lines += 1
                    logger.debug("Could not parse line %d: %s", line_num, line[:100].rstrip("\r\n"))
                    continue
                state.add(record)
    except OSError as e:
        raise UnreadableLogFile(e.errno, f"Unable to read log file: {e.strerror or e}", str(filepath)) from e

    logger.info(
        "Parsed %d records from %s (%d bad lines skipped)",
        state.total,
        filepath,
        state.bad_lines,
    )

    if not state.total:
        logger.warning("No valid log entries found in %s", filepath)
        return None

    return state.report()


def files_frame(report: StatsReport) -> pl.DataFrame:
    """Per-path visit counts as a Polars DataFrame, in first-seen order."""
    return pl.DataFrame([f.model_dump() for f in report.files], schema=FILES_SCHEMA)


def referers_frame(report: StatsReport) -> pl.DataFrame:
    """Per-referer request counts as a Polars DataFrame, in first-seen order."""
    return pl.DataFrame([r.model_dump() for r in report.referers], schema=REFERERS_SCHEMA)
