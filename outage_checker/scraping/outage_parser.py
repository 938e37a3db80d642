# scraping/outage_parser.py
"""
Outage record extraction for the HEP "bez struje" page.

The page is flattened to plain text lines (see hep_scraper.flatten_page) and
each line is classified by its leading label:

    Mjesto:               location, starts a new record
    Ulica:                street
    Očekivano trajanje:   expected duration, value inline or on the next line
    Napomena:             note

The portal is not consistent about where the duration value goes, so the
extractor keeps one bit of lookahead state: after an empty duration label the
next non-empty line containing "-" (e.g. "09:00 - 11:30") is taken as the time.

Known limitation: a wrapped time value without a hyphen is dropped, and an
unrelated hyphenated line right after an empty duration label is taken as the
time. Kept as-is for compatibility with existing reports.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

LOCATION_LABEL = "Mjesto:"
STREET_LABEL = "Ulica:"
DURATION_LABEL = "Očekivano trajanje:"
NOTE_LABEL = "Napomena:"


@dataclass(frozen=True)
class OutageRecord:
    date: str
    location: str
    street: str = ""
    time: str = ""
    note: str = ""


class LineKind(Enum):
    LOCATION = "location"
    STREET = "street"
    DURATION = "duration"
    NOTE = "note"
    CONTINUATION = "continuation"
    UNRECOGNIZED = "unrecognized"


# checked in this order, first match wins
MARKERS = (
    (LineKind.LOCATION, LOCATION_LABEL),
    (LineKind.STREET, STREET_LABEL),
    (LineKind.DURATION, DURATION_LABEL),
    (LineKind.NOTE, NOTE_LABEL),
)


@dataclass(frozen=True)
class ExtractorState:
    open_record: Optional[OutageRecord] = None
    awaiting_continuation: bool = False


Step = Tuple[ExtractorState, Optional[OutageRecord]]


def classify_line(line: str, awaiting_continuation: bool = False) -> Tuple[LineKind, str]:
    """Return the line kind and its value (text after the label, stripped)."""
    for kind, label in MARKERS:
        if line.startswith(label):
            return kind, line[len(label):].strip()
    if awaiting_continuation and line and "-" in line:
        return LineKind.CONTINUATION, line
    return LineKind.UNRECOGNIZED, line


def _set_field(state: ExtractorState, **fields) -> ExtractorState:
    record = state.open_record
    if record is not None:
        record = replace(record, **fields)
    return ExtractorState(open_record=record, awaiting_continuation=False)


def _on_location(state: ExtractorState, value: str, heading: str) -> Step:
    # the previous record is sealed before the next one opens
    sealed = state.open_record
    return ExtractorState(open_record=OutageRecord(date=heading, location=value)), sealed


def _on_street(state: ExtractorState, value: str, heading: str) -> Step:
    return _set_field(state, street=value), None


def _on_duration(state: ExtractorState, value: str, heading: str) -> Step:
    if not value:
        return ExtractorState(open_record=state.open_record, awaiting_continuation=True), None
    return _set_field(state, time=value), None


def _on_note(state: ExtractorState, value: str, heading: str) -> Step:
    return _set_field(state, note=value), None


def _on_continuation(state: ExtractorState, value: str, heading: str) -> Step:
    return _set_field(state, time=value), None


def _on_unrecognized(state: ExtractorState, value: str, heading: str) -> Step:
    return state, None


TRANSITIONS: Dict[LineKind, Callable[[ExtractorState, str, str], Step]] = {
    LineKind.LOCATION: _on_location,
    LineKind.STREET: _on_street,
    LineKind.DURATION: _on_duration,
    LineKind.NOTE: _on_note,
    LineKind.CONTINUATION: _on_continuation,
    LineKind.UNRECOGNIZED: _on_unrecognized,
}


def step(state: ExtractorState, line: str, heading: str) -> Step:
    """Advance the extractor by one line. Returns (next_state, sealed_record)."""
    kind, value = classify_line(line, state.awaiting_continuation)
    return TRANSITIONS[kind](state, value, heading)


def iter_outages(heading: str, lines: Iterable[str]) -> Iterator[OutageRecord]:
    state = ExtractorState()
    for line in lines:
        state, sealed = step(state, line, heading)
        if sealed is not None:
            yield sealed
    if state.open_record is not None:
        yield state.open_record


def extract_outages(heading: str, lines: Iterable[str]) -> List[OutageRecord]:
    """
    Build outage records from flattened page lines.

    `heading` is used verbatim as the date of every record on the page.
    Malformed input never raises; it yields partial or no records.
    """
    return list(iter_outages(heading, lines))
