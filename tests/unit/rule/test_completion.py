"""Tests for the completion toggle protocol.

The store is an in-memory fake so every check can see exactly which
writes happened.
"""

import datetime

import pytest

from app.rule.clock import LocalDay
from app.rule.completion import ToggleError, ToggleResult, check_eligibility, toggle_completion
from app.schemas.practice import Lane, Practice, PracticeOverride, Recurrence, Season

FRIDAY = LocalDay.from_date(datetime.date(2026, 3, 6))
THURSDAY = LocalDay.from_date(datetime.date(2026, 3, 5))
NOW = datetime.datetime(2026, 3, 6, 14, 0, tzinfo=datetime.timezone.utc)


# ======================================================================
# Helpers
# ======================================================================


class FakeStore:
    """CompletionStore keeping everything in dicts and recording writes."""

    def __init__(self, practices=(), overrides=()):
        self.practices = {p.id: p for p in practices}
        self.overrides = {(o.user_id, o.practice_id): o for o in overrides}
        self.completions: dict[tuple, datetime.datetime] = {}
        self.writes: list[tuple] = []

    def get_practice(self, practice_id):
        return self.practices.get(practice_id)

    def get_override(self, user_id, practice_id):
        return self.overrides.get((user_id, practice_id))

    def completion_exists(self, user_id, practice_id, date_local):
        return (user_id, practice_id, date_local) in self.completions

    def add_completion(self, user_id, practice_id, date_local, completed_at):
        self.writes.append(("add", user_id, practice_id, date_local))
        key = (user_id, practice_id, date_local)
        if key in self.completions:
            return False
        self.completions[key] = completed_at
        return True

    def remove_completion(self, user_id, practice_id, date_local):
        self.writes.append(("remove", user_id, practice_id, date_local))
        return self.completions.pop((user_id, practice_id, date_local), None) is not None


def _practice(id: int = 1, recurrence=Recurrence.DAILY, weekday=None, **overrides) -> Practice:
    defaults = {
        "key": f"practice_{id}",
        "season": Season.LENT,
        "lane": Lane.ASCETIC,
        "title": "Fast",
        "recurrence": recurrence,
        "scheduled_weekday": weekday,
    }
    defaults.update(overrides)
    return Practice(id=id, **defaults)


# ======================================================================
# Toggling
# ======================================================================


class TestToggle:
    def test_done_then_not_done(self):
        store = FakeStore([_practice()])

        first = toggle_completion(store, 7, 1, FRIDAY, NOW)
        assert first == ToggleResult.done(True)
        assert store.completions == {(7, 1, FRIDAY.date_local): NOW}

        second = toggle_completion(store, 7, 1, FRIDAY, NOW)
        assert second == ToggleResult.done(False)
        assert store.completions == {}

    def test_dates_are_independent(self):
        store = FakeStore([_practice()])
        toggle_completion(store, 7, 1, THURSDAY, NOW)
        toggle_completion(store, 7, 1, FRIDAY, NOW)
        assert len(store.completions) == 2

    def test_users_are_independent(self):
        store = FakeStore([_practice()])
        toggle_completion(store, 7, 1, FRIDAY, NOW)
        result = toggle_completion(store, 8, 1, FRIDAY, NOW)
        assert result.completed is True
        assert len(store.completions) == 2

    def test_concurrent_insert_still_reports_done(self):
        class RacingStore(FakeStore):
            def completion_exists(self, user_id, practice_id, date_local):
                # Row appears between the read and the insert
                return False

        store = RacingStore([_practice()])
        store.completions[(7, 1, FRIDAY.date_local)] = NOW
        result = toggle_completion(store, 7, 1, FRIDAY, NOW)
        assert result == ToggleResult.done(True)
        assert len(store.completions) == 1

    def test_weekly_practice_on_its_day(self):
        store = FakeStore([_practice(recurrence=Recurrence.WEEKLY, weekday=5)])
        assert toggle_completion(store, 7, 1, FRIDAY, NOW).completed is True

    def test_weekly_practice_on_overridden_day(self):
        fast = _practice(key="lent_friday_fast", recurrence=Recurrence.WEEKLY, weekday=3)
        store = FakeStore([fast], [PracticeOverride(user_id=7, practice_id=1, scheduled_weekday=5)])
        assert toggle_completion(store, 7, 1, FRIDAY, NOW).completed is True
        assert toggle_completion(store, 7, 1, THURSDAY, NOW).error == ToggleError.NOT_SCHEDULED_TODAY


# ======================================================================
# Eligibility
# ======================================================================


class TestEligibility:
    def test_unauthenticated_does_not_touch_the_store(self):
        store = FakeStore([_practice()])
        result = toggle_completion(store, None, 1, FRIDAY, NOW)
        assert result.ok is False
        assert result.error == ToggleError.UNAUTHENTICATED
        assert store.writes == []
        assert store.completions == {}

    def test_unknown_practice(self):
        result = toggle_completion(FakeStore(), 7, 42, FRIDAY, NOW)
        assert result.error == ToggleError.NOT_FOUND

    def test_inactive_practice_is_not_found(self):
        store = FakeStore([_practice(is_active=False)])
        assert toggle_completion(store, 7, 1, FRIDAY, NOW).error == ToggleError.NOT_FOUND
        assert store.writes == []

    def test_disabled_practice(self):
        store = FakeStore([_practice()], [PracticeOverride(user_id=7, practice_id=1, is_enabled=False)])
        result = toggle_completion(store, 7, 1, FRIDAY, NOW)
        assert result.error == ToggleError.DISABLED
        assert result.message == "This practice is disabled."
        assert store.writes == []

    def test_another_users_override_does_not_apply(self):
        store = FakeStore([_practice()], [PracticeOverride(user_id=8, practice_id=1, is_enabled=False)])
        assert toggle_completion(store, 7, 1, FRIDAY, NOW).ok is True

    def test_weekly_practice_on_wrong_day(self):
        store = FakeStore([_practice(recurrence=Recurrence.WEEKLY, weekday=5)])
        result = toggle_completion(store, 7, 1, THURSDAY, NOW)
        assert result.error == ToggleError.NOT_SCHEDULED_TODAY
        assert store.writes == []

    def test_weekly_practice_without_weekday(self):
        store = FakeStore([_practice(recurrence=Recurrence.WEEKLY, weekday=None)])
        result = check_eligibility(store, 7, 1, FRIDAY)
        assert result.error == ToggleError.NOT_SCHEDULED_TODAY
        assert result.message == "Weekly practice has no weekday set."

    @pytest.mark.parametrize("user_id,practice_id,expected", [
        (None, 42, ToggleError.UNAUTHENTICATED),
        (7, 42, ToggleError.NOT_FOUND),
    ])
    def test_first_failure_wins(self, user_id, practice_id, expected):
        assert check_eligibility(FakeStore(), user_id, practice_id, FRIDAY).error == expected

    def test_eligible_returns_none(self):
        assert check_eligibility(FakeStore([_practice()]), 7, 1, FRIDAY) is None
