"""
Override resolution.

Merges the practice catalog with one user's overrides into
:class:`EffectivePractice` values::

    is_enabled                  = override.is_enabled        (default True)
    effective_scheduled_weekday = override.weekday ?? practice.weekday
    effective_title             = strip(override.custom_title) or practice.title
    effective_description       = strip(override.custom_description) or practice.description

Each practice is resolved on its own; there is no interaction between
practices and neither input is modified.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from app.schemas.practice import EffectivePractice, Practice, PracticeOverride

logger = logging.getLogger(__name__)


def _custom_text(value: Optional[str]) -> Optional[str]:
    """Return stripped override text, or ``None`` when blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def index_overrides(overrides: Iterable[PracticeOverride]) -> dict[int, PracticeOverride]:
    """Map ``practice_id`` to its override.

    The store guarantees one override per (user, practice).  If the input
    still holds duplicates, the last one wins and a warning is logged.
    """
    by_practice: dict[int, PracticeOverride] = {}
    for override in overrides:
        if override.practice_id in by_practice:
            logger.warning("duplicate override for practice_id=%s user_id=%s; keeping the last one",
                           override.practice_id, override.user_id)
        by_practice[override.practice_id] = override
    return by_practice


def resolve_practice(practice: Practice, override: Optional[PracticeOverride]) -> EffectivePractice:
    """Merge a single practice with its override (or ``None``)."""
    if override is None:
        return EffectivePractice(
            **practice.model_dump(),
            is_enabled=True,
            effective_scheduled_weekday=practice.scheduled_weekday,
            effective_title=practice.title,
            effective_description=practice.description,
        )

    weekday = override.scheduled_weekday
    if weekday is None:
        weekday = practice.scheduled_weekday

    return EffectivePractice(
        **practice.model_dump(),
        is_enabled=override.is_enabled,
        effective_scheduled_weekday=weekday,
        effective_title=_custom_text(override.custom_title) or practice.title,
        effective_description=_custom_text(override.custom_description) or practice.description,
    )


def resolve_overrides(practices: Iterable[Practice],
                      overrides: Iterable[PracticeOverride]) -> list[EffectivePractice]:
    """Resolve every practice against the override list.  Never fails."""
    by_practice = index_overrides(overrides)
    return [resolve_practice(p, by_practice.get(p.id)) for p in practices]
