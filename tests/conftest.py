import pytest


def build_line(
    host="192.168.1.100",
    path="/index.html",
    status="200",
    referer='"https://example.com/"',
    method="GET",
    protocol="HTTP/1.1",
    size="4998",
    agent='"Mozilla/5.0 (X11; Linux x86_64)"',
):
    """Build a Combined Log Format line with a trailing newline."""
    return (
        f'{host} - - [19/Dec/2025:00:08:24 +0100] "{method} {path} {protocol}" '
        f"{status} {size} {referer} {agent}\n"
    )


@pytest.fixture
def sample_line():
    return (
        '10.0.0.7 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" '
        '200 2326 "http://www.example.com/start.html" "Mozilla/4.08 [en] (Win98; I ;Nav)"\n'
    )


@pytest.fixture
def write_log(tmp_path):
    """Write the given lines to a log file and return its path."""

    def _write(lines, name="access.log"):
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_line():
    """Builder for Combined Log Format lines, keyword arguments override fields."""
    return build_line
