"""
Display ordering of effective practices.

Sort key, in priority order:

1. lane, in the fixed order PRAYER, ASCETIC, CHARITY, ATTENTION
   (unknown lanes last),
2. ``sort_order`` ascending,
3. ``effective_title`` ascending,
4. practice id.

The id makes the key total, so any permutation of the same practices
sorts to the same list.
"""

from __future__ import annotations

from typing import Iterable

from app.schemas.practice import LANE_ORDER, EffectivePractice

_LANE_INDEX: dict[str, int] = {lane.value: idx for idx, lane in enumerate(LANE_ORDER)}
_UNKNOWN_LANE = len(LANE_ORDER)


def lane_index(lane) -> int:
    value = getattr(lane, "value", lane)
    return _LANE_INDEX.get(value, _UNKNOWN_LANE)


def practice_sort_key(practice: EffectivePractice) -> tuple[int, int, str, int]:
    return lane_index(practice.lane), practice.sort_order, practice.effective_title, practice.id


def sort_practices(practices: Iterable[EffectivePractice]) -> list[EffectivePractice]:
    """Return a new list in display order."""
    return sorted(practices, key=practice_sort_key)
