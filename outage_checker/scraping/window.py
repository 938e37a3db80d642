# scraping/window.py
"""
Collect outages over a rolling window of days (today .. today+N).

Each day is fetched and parsed on its own; a failure for one day is logged and
recorded as a diagnostic, never raised, so the rest of the window still runs.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, List, Optional

from .hep_scraper import DATE_FORMAT, fetch_page, parse_outages
from .outage_parser import OutageRecord

DEFAULT_WINDOW_DAYS = 7
DEFAULT_DELAY_SECONDS = 0.5


@dataclass(frozen=True)
class DateOutcome:
    date: str
    records: List[OutageRecord] = field(default_factory=list)
    error: Optional[str] = None
    stage: Optional[str] = None  # "fetch" | "parse"

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WindowResult:
    outcomes: List[DateOutcome] = field(default_factory=list)

    @property
    def records(self) -> List[OutageRecord]:
        return [r for o in self.outcomes for r in o.records]

    @property
    def diagnostics(self) -> List[DateOutcome]:
        return [o for o in self.outcomes if not o.ok]


def window_dates(start_date: date, days: int = DEFAULT_WINDOW_DAYS) -> List[str]:
    """Portal-formatted dates for offsets 0..days inclusive."""
    return [(start_date + timedelta(days=n)).strftime(DATE_FORMAT) for n in range(days + 1)]


def check_date(date_str, region_id, office_id, fetch=fetch_page, parse=parse_outages, logger=None) -> DateOutcome:
    try:
        html = fetch(date_str, region_id, office_id)
    except Exception as e:
        # requests.RequestException in practice; any fetch failure skips the date
        if logger: logger.error(f"[{date_str}] Error fetching page: {type(e).__name__}: {e}")
        return DateOutcome(date=date_str, error=str(e), stage="fetch")

    try:
        records = list(parse(html))
    except Exception as e:
        if logger: logger.error(f"[{date_str}] Error parsing outages: {type(e).__name__}: {e}")
        return DateOutcome(date=date_str, error=str(e), stage="parse")

    if logger:
        if records:
            logger.info(f"[{date_str}] Found {len(records)} outage(s)")
            for r in records:
                logger.info(f"[{date_str}]   - {r.location}: {r.time}")
        else:
            logger.info(f"[{date_str}] No outages scheduled")
    return DateOutcome(date=date_str, records=records)


def collect_window(
    start_date: date,
    region_id: str,
    office_id: str,
    days: int = DEFAULT_WINDOW_DAYS,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    fetch: Callable[[str, str, str], str] = fetch_page,
    parse: Callable[[str], List[OutageRecord]] = parse_outages,
    sleep: Callable[[float], None] = time.sleep,
    logger=None,
) -> WindowResult:
    result = WindowResult()
    for idx, date_str in enumerate(window_dates(start_date, days)):
        if idx and delay_seconds > 0:
            # politeness delay between requests, whatever the last outcome was
            sleep(delay_seconds)
        if logger: logger.info(f"Checking date: {date_str}")
        result.outcomes.append(
            check_date(date_str, region_id, office_id, fetch=fetch, parse=parse, logger=logger)
        )

    if logger and result.diagnostics:
        failed = ", ".join(o.date for o in result.diagnostics)
        logger.warning(f"{len(result.diagnostics)} date(s) failed: {failed}")
    return result
