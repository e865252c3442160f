from typing import List, Tuple

from .models import Record


SAMPLE_SCORES: List[Tuple[str, int]] = [
    ("Ayesha", 75),
    ("Thilina", 82),
    ("Nimasha", 68),
    ("Sahan", 90),
    ("Dilki", 78),
    ("Kamal", 85),
    ("Rashmi", 72),
    ("Dinesh", 88),
]


def sample_records() -> List[Record]:
    """Fresh, unsorted copy of the demo class list."""
    return [Record(name=name, score=score) for name, score in SAMPLE_SCORES]
