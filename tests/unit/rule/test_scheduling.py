"""Tests for the due-today filter and the weekly look-ahead."""

import pytest

from app.rule.errors import InvalidInputError
from app.rule.overrides import resolve_overrides
from app.rule.scheduling import days_until_label, due_today, is_due_on, upcoming_weekly
from app.schemas.practice import Lane, Practice, PracticeOverride, Recurrence, Season


# ======================================================================
# Helpers
# ======================================================================


def _practice(id: int, recurrence=Recurrence.DAILY, weekday=None, **overrides) -> Practice:
    defaults = {
        "key": f"practice_{id}",
        "season": Season.ORDINARY_TIME,
        "lane": Lane.PRAYER,
        "title": f"Practice {id}",
        "description": "",
        "recurrence": recurrence,
        "scheduled_weekday": weekday,
    }
    defaults.update(overrides)
    return Practice(id=id, **defaults)


def _effective(practices, overrides=()):
    return resolve_overrides(practices, list(overrides))


# ======================================================================
# due_today
# ======================================================================


class TestDueToday:
    def test_daily_practice_due_every_day(self):
        eff = _effective([_practice(1)])
        for weekday in range(7):
            assert [p.id for p in due_today(eff, weekday)] == [1]

    def test_weekly_practice_due_on_its_weekday_only(self):
        eff = _effective([_practice(1, Recurrence.WEEKLY, 5)])
        assert [p.id for p in due_today(eff, 5)] == [1]
        assert due_today(eff, 4) == []

    def test_overridden_weekday_moves_the_practice(self):
        fast = _practice(1, Recurrence.WEEKLY, 3, title="Fast", lane=Lane.ASCETIC)
        eff = _effective([fast], [PracticeOverride(user_id=1, practice_id=1, scheduled_weekday=5)])
        assert [p.id for p in due_today(eff, 5)] == [1]
        assert due_today(eff, 3) == []

    def test_weekly_without_weekday_is_never_due(self):
        eff = _effective([_practice(1, Recurrence.WEEKLY, None)])
        assert all(due_today(eff, weekday) == [] for weekday in range(7))

    def test_disabled_practice_is_not_due(self):
        eff = _effective([_practice(1)], [PracticeOverride(user_id=1, practice_id=1, is_enabled=False)])
        assert due_today(eff, 2) == []

    def test_inactive_practice_is_not_due(self):
        eff = _effective([_practice(1, is_active=False)])
        assert not is_due_on(eff[0], 0)

    @pytest.mark.parametrize("weekday", [-1, 7, True])
    def test_invalid_weekday_raises(self, weekday):
        with pytest.raises(InvalidInputError):
            due_today([], weekday)


# ======================================================================
# upcoming_weekly
# ======================================================================


class TestUpcomingWeekly:
    def test_sorted_by_distance_and_wraps_the_week(self):
        eff = _effective([
            _practice(1, Recurrence.WEEKLY, 0, title="Sabbath"),
            _practice(2, Recurrence.WEEKLY, 6, title="Visit"),
            _practice(3, Recurrence.WEEKLY, 3, title="Mercy"),
        ])
        # Friday: Saturday is 1 day away, Sunday 2, Wednesday 5
        upcoming = upcoming_weekly(eff, 5)
        assert [(u.practice.id, u.days_until) for u in upcoming] == [(2, 1), (1, 2), (3, 5)]
        assert [u.when for u in upcoming] == ["Tomorrow", "In 2 days", "In 5 days"]
        assert upcoming[0].weekday_label == "Sat"

    def test_excludes_today_daily_and_unscheduled(self):
        eff = _effective([
            _practice(1, Recurrence.WEEKLY, 2),
            _practice(2),
            _practice(3, Recurrence.WEEKLY, None),
            _practice(4, Recurrence.WEEKLY, 4),
        ])
        assert [u.practice.id for u in upcoming_weekly(eff, 2)] == [4]

    def test_excludes_disabled(self):
        eff = _effective([_practice(1, Recurrence.WEEKLY, 4)],
                         [PracticeOverride(user_id=1, practice_id=1, is_enabled=False)])
        assert upcoming_weekly(eff, 2) == []

    def test_limit_defaults_to_three(self):
        eff = _effective([_practice(i, Recurrence.WEEKLY, i) for i in range(1, 7)])
        assert [u.days_until for u in upcoming_weekly(eff, 0)] == [1, 2, 3]
        assert len(upcoming_weekly(eff, 0, limit=10)) == 6
        assert upcoming_weekly(eff, 0, limit=0) == []

    def test_ties_broken_by_title_then_id(self):
        eff = _effective([
            _practice(5, Recurrence.WEEKLY, 1, title="Beta"),
            _practice(4, Recurrence.WEEKLY, 1, title="Alpha"),
            _practice(2, Recurrence.WEEKLY, 1, title="Beta"),
        ])
        assert [u.practice.id for u in upcoming_weekly(eff, 0)] == [4, 2, 5]

    def test_uses_overridden_weekday(self):
        eff = _effective([_practice(1, Recurrence.WEEKLY, 3)],
                         [PracticeOverride(user_id=1, practice_id=1, scheduled_weekday=6)])
        upcoming = upcoming_weekly(eff, 5)
        assert upcoming[0].days_until == 1
        assert upcoming[0].weekday == 6


class TestDaysUntilLabel:
    def test_labels(self):
        assert days_until_label(1) == "Tomorrow"
        assert days_until_label(4) == "In 4 days"
