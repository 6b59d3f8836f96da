"""
Parser for Common/Combined Log Format lines.
Converts one raw line into a LogRecord, or None when the line is malformed.
"""

import re
from typing import Optional

from http_log_stats.model import LogRecord


# Regex pattern for the Combined Log Format
# Format: host identity user [date:time timezone] "method path protocol" status size "referer" "agent"
# The path is non-greedy so paths containing spaces still parse when
# method and protocol are single tokens
# ASCII-only \S, \s and \d: non-ASCII characters such as U+00A0 are token characters
LOG_PATTERN = re.compile(
    r'^(\S+) (\S+) (\S+) '
    r'\[([^:]+):(\d+:\d+:\d+) ([^\]]+)\] '
    r'"(\S+) (.*?) (\S+)" '
    r'(\S+) (\S+) '
    r'(".*?") (".*?")$',
    re.ASCII,
)

# Record fields in capture group order
FIELD_NAMES = (
    "host",
    "identity",
    "user",
    "date",
    "time",
    "timezone",
    "method",
    "path",
    "protocol",
    "status",
    "size",
    "referer",
    "agent",
)


def parse_log_line(line: str) -> Optional[LogRecord]:
    """
    Parse a single log line into a LogRecord.

    Returns None if the line does not match the full 13-field format.
    There is no partial fallback: a line either yields every field or
    nothing at all.
    """
    match = LOG_PATTERN.match(line.rstrip("\r\n"))
    if not match:
        return None

    return LogRecord(**dict(zip(FIELD_NAMES, match.groups())))
