from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError

from ..core.models import Record
from ..errors import RecordParseError
from .text_parsers import iter_markdown_tables, MarkdownTable


logger = logging.getLogger(__name__)

NAME_COLUMNS = ("name", "student", "player")
SCORE_COLUMNS = ("score", "marks", "points")


def _make_record(value: str, name: str, score: str) -> Record:
    name = name.strip()
    if not name:
        raise RecordParseError(value, "name is empty")
    try:
        return Record(name=name, score=score.strip())
    except ValidationError:
        raise RecordParseError(value, f"score {score.strip()!r} is not an integer") from None


def parse_record_arg(value: str) -> Record:
    """Parse a `Name=Score` (or `Name:Score`) command-line record."""
    for sep in ("=", ":"):
        if sep in value:
            name, score = value.rsplit(sep, 1)
            return _make_record(value, name, score)
    raise RecordParseError(value, "expected NAME=SCORE")


def _records_from_table(t: MarkdownTable) -> Optional[List[Record]]:
    name_idx = t.column_index(NAME_COLUMNS)
    score_idx = t.column_index(SCORE_COLUMNS)
    if name_idx is None or score_idx is None:
        return None
    out: List[Record] = []
    for r in t.rows:
        if len(r) <= max(name_idx, score_idx):
            continue
        name = r[name_idx].strip()
        if not name:
            continue
        try:
            out.append(_make_record(name, name, r[score_idx]))
        except RecordParseError as exc:
            logger.warning("Skipping row: %s", exc)
    return out


def records_from_markdown(md: str) -> List[Record]:
    """Read records from the first Markdown table with a name and a score column.

    Rows are returned in table order; sorting is left to the caller.
    """
    for t in iter_markdown_tables(md):
        records = _records_from_table(t)
        if records is not None:
            logger.debug("Loaded %d records from table %r", len(records), t.section)
            return records
    raise RecordParseError("<markdown>", "no table with a name and a score column")
