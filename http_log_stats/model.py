"""
Pydantic models for access log records and the traffic statistics built from them.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LogRecord(BaseModel):
    """
    Represents a single line from a Common/Combined Log Format file.

    Format:
    host identity user [date:time timezone] "method path protocol" status size "referer" "agent"

    Every field is kept as the raw text captured from the line. Nothing is
    converted, so placeholder values such as "-" survive untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "host": "192.168.1.100",
                "identity": "-",
                "user": "-",
                "date": "19/Dec/2025",
                "time": "00:08:24",
                "timezone": "+0100",
                "method": "GET",
                "path": "/index.html",
                "protocol": "HTTP/1.1",
                "status": "200",
                "size": "4998",
                "referer": '"https://example.com/"',
                "agent": '"Mozilla/5.0 (Windows NT 10.0; Win64; x64)"',
            }
        },
    )

    host: str = Field(
        description="IP address or hostname of the client making the request"
    )

    identity: str = Field(
        description="RFC 1413 identity of the client (typically '-')"
    )

    user: str = Field(
        description="Authenticated username (typically '-' if not authenticated)"
    )

    date: str = Field(
        description="Request date as written in the log, e.g. '19/Dec/2025'"
    )

    time: str = Field(
        description="Request time of day as written in the log, e.g. '00:08:24'"
    )

    timezone: str = Field(
        description="UTC offset as written in the log, e.g. '+0100'"
    )

    method: str = Field(
        description="HTTP method used in the request (GET, POST, HEAD, etc.)"
    )

    path: str = Field(
        description="Requested path including any query string, may contain spaces"
    )

    protocol: str = Field(
        description="HTTP protocol version used by the client (e.g., 'HTTP/1.1')"
    )

    status: str = Field(
        description="Status code token returned by the server (e.g., '200', '404')"
    )

    size: str = Field(
        description="Response size token, either a byte count or '-'"
    )

    referer: str = Field(
        description="Referer header including its surrounding double quotes"
    )

    agent: str = Field(
        description="User agent string including its surrounding double quotes"
    )


class CountStats(BaseModel):
    """Overall request counts and the success/error split."""

    total_count: int = Field(description="Number of valid records in the log")
    success: int = Field(description="Records whose status starts with '2'")
    error: int = Field(description="All other records")
    success_pct: str = Field(description="Share of successes, three decimals")
    error_pct: str = Field(description="Share of errors, three decimals")


class FileStats(BaseModel):
    path: str
    visits: int
    visited_pct: str


class RefererStats(BaseModel):
    referer: str
    requests: int
    request_pct: str


class StatsReport(BaseModel):
    """
    Aggregated traffic statistics for one log file.

    ``files`` and ``referers`` are listed in the order each key was first
    seen in the log. No sorting is applied.
    """

    count: CountStats
    files: List[FileStats] = Field(default_factory=list)
    referers: List[RefererStats] = Field(default_factory=list)
    bad_lines: int = Field(
        default=0,
        description="Lines skipped because they did not match the log format",
    )
