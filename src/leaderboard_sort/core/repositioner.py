from __future__ import annotations

import logging
from typing import List

from .models import Record, UpdateResult


logger = logging.getLogger(__name__)


def find_index(records: List[Record], name: str) -> int:
    """Linear scan for the first record called `name`; -1 when absent."""
    for i, record in enumerate(records):
        if record.name == name:
            return i
    return -1


def update_score(records: List[Record], name: str, new_score: int) -> UpdateResult:
    """
    Set one record's score and move it to its place in an already sorted list.

    `records` must already be sorted highest-first; that is assumed, not
    checked. The list is mutated in place. The record bubbles toward the
    front when it now beats its predecessor, otherwise toward the back when
    it now trails its successor, and never both. It stops next to the first
    neighbour with an equal score, so an update never reorders ties.

    Search and shift are both linear. A missing name returns a result with
    found=False and leaves the list untouched.
    """
    index = find_index(records, name)
    if index == -1:
        logger.debug("Record '%s' not found", name)
        return UpdateResult(name=name, found=False)

    record = records[index]
    old_score = record.score
    old_index = index
    record.score = new_score
    logger.info("[UPDATE] %s: %d -> %d", name, old_score, new_score)

    if index > 0 and records[index].score > records[index - 1].score:
        while index > 0 and records[index].score > records[index - 1].score:
            _swap(records, index, index - 1)
            index -= 1
    else:
        last = len(records) - 1
        while index < last and records[index].score < records[index + 1].score:
            _swap(records, index, index + 1)
            index += 1

    if index != old_index:
        logger.debug("Moved %s from rank %d to rank %d", name, old_index + 1, index + 1)

    return UpdateResult(
        name=name,
        found=True,
        old_score=old_score,
        new_score=new_score,
        old_rank=old_index + 1,
        new_rank=index + 1,
    )


def _swap(records: List[Record], i: int, j: int) -> None:
    records[i], records[j] = records[j], records[i]
