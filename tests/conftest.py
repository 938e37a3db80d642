"""
Shared fixtures and helpers for the test suite.

- make_outage: OutageRecord factory with test defaults
- outage_page: builds a portal-like HTML page from outage blocks
- clean_env: strips every variable AppConfig reads
"""

import pytest

from outage_checker.scraping.outage_parser import OutageRecord
from outage_checker.utils.env_util import EMAIL_VARS, PORTAL_VARS


def make_outage(
    date="20.10.2026",
    location="Zagreb",
    street="Ilica 1-20",
    time="08:00 - 12:00",
    note="",
) -> OutageRecord:
    return OutageRecord(date=date, location=location, street=street, time=time, note=note)


def outage_page(heading, blocks):
    """
    blocks: list of lists of text lines, one list per outage section.
    Each line becomes its own paragraph so the flattened text keeps the line breaks.
    """
    sections = []
    for block in blocks:
        paragraphs = "\n".join(f"<p>{line}</p>" for line in block)
        sections.append(f"<div class=\"outage\">\n{paragraphs}\n</div>\n<hr>")
    body = "\n".join(sections)
    return (
        "<html><head><title>Bez struje</title>"
        "<script>var x = 'Mjesto: ne';</script></head>\n"
        f"<body>\n<h3>{heading}</h3>\n{body}\n</body></html>"
    )


@pytest.fixture
def clean_env(monkeypatch):
    for key in PORTAL_VARS + EMAIL_VARS + ("SMTP_SERVER", "SMTP_PORT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
