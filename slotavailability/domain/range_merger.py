"""
Merging of overlapping or touching time ranges.
"""

import logging
from typing import Iterable, List

from .models import TimeRange

logger = logging.getLogger(__name__)


def merge_ranges(ranges: Iterable[TimeRange]) -> List[TimeRange]:
    """
    Collapse ranges into the minimal set with no inclusive overlap.

    Output keeps the order in which each group was first seen rather than
    sorting by time. When a later range bridges two groups that were
    separate so far, they collapse into the earlier group.

    Example:
        [00:00-00:59, 01:00-02:00, 00:50-01:20] -> [00:00-02:00]
    """
    merged: List[TimeRange] = []

    for current in ranges:
        for index, existing in enumerate(merged):
            if existing.inclusive_overlaps(current):
                merged[index] = existing.hull(current)
                _absorb_into(merged, index)
                break
        else:
            merged.append(current)

    logger.debug("Merged ranges into %d group(s)", len(merged))
    return merged


def _absorb_into(merged: List[TimeRange], index: int) -> None:
    """
    Fold every entry that overlaps the grown ``merged[index]`` into it.

    All other entries are already pairwise disjoint, so only the grown one
    needs checking. The combined range takes the earlier of the two slots.
    """
    while True:
        grown = merged[index]
        other = next(
            (
                position for position, candidate in enumerate(merged)
                if position != index and candidate.inclusive_overlaps(grown)
            ),
            None,
        )
        if other is None:
            return

        keep, drop = min(index, other), max(index, other)
        merged[keep] = grown.hull(merged[other])
        del merged[drop]
        index = keep
