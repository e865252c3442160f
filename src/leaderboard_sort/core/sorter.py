from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import Record


logger = logging.getLogger(__name__)


def merge_sort(records: Optional[Sequence[Record]]) -> List[Record]:
    """
    Return a new list of records ordered by score, highest first.

    Recursive merge sort: O(N log N) in every case, O(N) extra space for the
    halves built at each level. Equal scores keep their input order.
    None, empty and single-record input come back as a fresh list.
    """
    items: List[Record] = list(records) if records else []
    if len(items) <= 1:
        return items
    logger.debug("Sorting %d records", len(items))
    return _merge_sort(items)


def _merge_sort(items: List[Record]) -> List[Record]:
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = _merge_sort(items[:mid])
    right = _merge_sort(items[mid:])
    return _merge(left, right)


def _merge(left: List[Record], right: List[Record]) -> List[Record]:
    result: List[Record] = []
    i = j = 0

    while i < len(left) and j < len(right):
        # >= keeps the left record first on ties, which is what makes this stable
        if left[i].score >= right[j].score:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


def is_sorted_descending(records: Sequence[Record]) -> bool:
    return all(records[k].score >= records[k + 1].score for k in range(len(records) - 1))
