"""
Import/export of team updates as delimited text.

Import reads the tab-separated export of the team's tracking spreadsheet.
Export writes the meeting report CSV (comma-separated, no quoting).
"""

from __future__ import annotations
import logging
import re
import uuid
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional

from config.constants import (
    DEFAULT_INITIATIVE,
    DEFAULT_PRIORITY_GOAL,
    DEFAULT_STATUS,
    DEFAULT_TEAM_MEMBER,
    EXPORT_FILENAME_PREFIX,
    EXPORT_HEADERS,
    UPLOAD_ENCODINGS,
)
from models.exceptions import MalformedInput
from models.update import RecordValidator, UpdateRecord


logger = logging.getLogger(__name__)

TAB = "\t"
COMMA = ","
MIN_FIELDS = 2
NEWLINE_PATTERN = re.compile(r'\r?\n')
EXPORT_HEADER_LINE = COMMA.join(EXPORT_HEADERS)


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _new_id(row_index: int) -> str:
    return f"csv-{row_index}-{uuid.uuid4().hex}"


def detect_delimiter(header: str) -> str:
    """Tab unless the header is exactly the header of our own CSV export."""
    if header.strip() == EXPORT_HEADER_LINE:
        return COMMA
    return TAB


def parse_line(line: str, row_index: int, today: str, delimiter: str = TAB) -> UpdateRecord:
    """
    Turn one data line into a record, filling defaults for missing fields.

    Raises MalformedInput when the line has fewer than two fields.
    """
    parts = [part.strip() for part in line.split(delimiter)]
    if len(parts) < MIN_FIELDS:
        raise MalformedInput(f"Line {row_index + 2} has {len(parts)} field(s), expected at least {MIN_FIELDS}")

    # Pad so that missing trailing columns read as empty
    parts += [""] * (len(EXPORT_HEADERS) - len(parts))
    member, title, report_date, goal, initiative, description, health, status, due, feedback = parts[:10]

    return UpdateRecord(
        id=_new_id(row_index),
        team_member=member or DEFAULT_TEAM_MEMBER,
        title=title,
        date=report_date or today,
        priority_goal=goal or DEFAULT_PRIORITY_GOAL,
        initiative=initiative or DEFAULT_INITIATIVE,
        description=description,
        health=RecordValidator.parse_int_prefix(health),
        status=status or DEFAULT_STATUS,
        due_date=due,
        feedback=feedback,
    )


def parse(raw_text: str, today: Optional[str] = None) -> List[UpdateRecord]:
    """
    Parse imported text into update records.

    The first non-blank line is the header and is discarded. Malformed lines
    are skipped; an empty list means nothing usable was found.
    """
    today = today or _today()
    lines = [line for line in (raw_text or "").split("\n") if line.strip()]
    if not lines:
        return []

    delimiter = detect_delimiter(lines[0])
    records = []
    skipped = 0
    for row_index, line in enumerate(lines[1:]):
        try:
            records.append(parse_line(line, row_index, today, delimiter))
        except MalformedInput as e:
            skipped += 1
            logger.debug(f"Skipping import line: {e}")

    if skipped:
        logger.info(f"Import skipped {skipped} malformed line(s), parsed {len(records)}")
    return records


def _sanitize(value: str) -> str:
    return NEWLINE_PATTERN.sub(" ", (value or "").replace(",", ";"))


def serialize(records: Iterable[UpdateRecord]) -> str:
    """
    Serialize records to the meeting report CSV.

    Commas inside text fields become semicolons and newlines become spaces,
    so the output needs no quoting. This is lossy: importing the file back
    keeps every value except the replaced punctuation.
    """
    rows = [EXPORT_HEADER_LINE]
    for record in records:
        row = [
            record.team_member,
            record.title,
            record.date,
            record.priority_goal,
            record.initiative,
            record.description,
            str(record.health),
            record.status,
            record.due_date,
            record.feedback,
        ]
        rows.append(COMMA.join(_sanitize(value) for value in row))
    return "\n".join(rows)


def export_filename(on: Optional[date] = None) -> str:
    """Download name for the meeting report, e.g. PPA_Meeting_Report_2026-02-03.csv."""
    on = on or datetime.now(timezone.utc).date()
    return f"{EXPORT_FILENAME_PREFIX}_{on.isoformat()}.csv"


def decode_upload(raw: bytes) -> str:
    """Decode uploaded bytes, trying UTF-8 first and then the fallback encodings."""
    for encoding in UPLOAD_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError("Could not decode file with any supported encoding")
