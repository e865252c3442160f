from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass
class MarkdownTable:
    section: str
    headers: List[str]
    rows: List[List[str]]

    def column_index(self, candidates: Iterable[str]) -> Optional[int]:
        """Index of the first header that starts with any candidate (case-insensitive)."""
        wanted = [c.lower() for c in candidates]
        for i, h in enumerate(self.headers):
            h = h.strip().lower()
            if any(h.startswith(c) for c in wanted):
                return i
        return None


def _heading_title(line: str) -> Optional[str]:
    s = line.strip()
    # "# Title" style heading, any depth
    if s.startswith("#"):
        title = s.lstrip("#").strip()
        return title or None
    # "**Title**" on a line of its own
    if s.startswith("**") and s.endswith("**") and len(s) >= 4:
        title = s.strip("*").strip()
        return title or None
    return None


def _is_separator(line: str) -> bool:
    # | --- | :---: |
    s = line.strip()
    if '|' not in s:
        return False
    body = s.replace('|', '').strip()
    return bool(body) and set(body) <= set('-: ')


def _split_row(line: str) -> List[str]:
    cells = line.strip().removeprefix('|').removesuffix('|')
    return [c.strip() for c in cells.split('|')]


def _read_body(lines: List[str], start: int) -> Tuple[List[List[str]], int]:
    """Collect rows from `start` until the table ends; returns rows and the next line index."""
    rows: List[List[str]] = []
    j = start
    while j < len(lines) and '|' in lines[j] and _heading_title(lines[j]) is None:
        row = _split_row(lines[j])
        if any(row):
            rows.append(row)
        j += 1
    return rows, j


def iter_markdown_tables(md: str) -> Iterator[MarkdownTable]:
    """Yield Markdown tables one at a time, each tagged with its nearest preceding heading.

    Lazy, so a caller that only wants the first matching table stops reading there.
    """
    lines = md.splitlines()
    section = ""
    i = 0
    while i < len(lines):
        title = _heading_title(lines[i])
        if title is not None:
            section = title
        elif '|' in lines[i] and i + 1 < len(lines) and _is_separator(lines[i + 1]):
            rows, end = _read_body(lines, i + 2)
            if rows:
                yield MarkdownTable(section=section, headers=_split_row(lines[i]), rows=rows)
                i = end
                continue
        i += 1


def parse_markdown_tables(md: str) -> List[MarkdownTable]:
    return list(iter_markdown_tables(md))
