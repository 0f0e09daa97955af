"""Tests for the account, settings, rule overview, history and export services."""

import datetime

import pytest
from fastapi import HTTPException

from app.core.security import decode_access_token
from app.db.repositories.completion import CompletionRepository
from app.db.repositories.practice_override import PracticeOverrideRepository
from app.db.repositories.user import UserRepository, normalize_email
from app.rule.overrides import resolve_practice
from app.schemas.practice import Lane, Practice, Recurrence, Season
from app.schemas.settings import OverrideUpdate, SettingsUpdate
from app.schemas.user import UserCreate, UserLogin
from app.services.export_service import ExportService
from app.services.history_service import HistoryService
from app.services.rule_service import RuleService, schedule_label
from app.services.settings_service import SettingsService
from app.services.user_service import UserService

D = datetime.date


def _complete(session, user, practice_id, day):
    at = datetime.datetime(day.year, day.month, day.day, 12, 0, tzinfo=datetime.timezone.utc)
    CompletionRepository(session).add(user.id, practice_id, day, at)


# ======================================================================
# Settings
# ======================================================================


class TestSettingsService:
    def test_lists_weekly_practices_only(self, session, user):
        response = SettingsService(session).get(user.id)
        titles = [p.title for p in response.weekly_practices]
        assert "Fast" in titles
        assert "No sweets" not in titles
        assert response.wake_time is None

    def test_weekly_practices_in_season_order(self, session, user):
        labels = [p.season_label for p in SettingsService(session).get(user.id).weekly_practices]
        assert labels.index("Advent") < labels.index("Christmas") < labels.index("Lent") \
            < labels.index("Easter") < labels.index("Ordinary Time")

    def test_update_override_and_wake_time(self, session, user, practice_ids):
        fast = practice_ids["lent_friday_fast"]
        data = SettingsUpdate(wake_time="06:15", overrides=[
            OverrideUpdate(practice_id=fast, scheduled_weekday=3, custom_title="Wednesday fast"),
        ])
        response = SettingsService(session).update(user.id, data)

        assert response.wake_time == "06:15"
        item = next(p for p in response.weekly_practices if p.id == fast)
        assert item.scheduled_weekday == 3
        assert item.title == "Wednesday fast"
        assert item.custom_title == "Wednesday fast"

    def test_partial_update_keeps_other_fields(self, session, user, practice_ids):
        fast = practice_ids["lent_friday_fast"]
        service = SettingsService(session)
        service.update(user.id, SettingsUpdate(overrides=[OverrideUpdate(practice_id=fast, scheduled_weekday=3)]))
        service.update(user.id, SettingsUpdate(overrides=[OverrideUpdate(practice_id=fast, is_enabled=False)]))

        row = PracticeOverrideRepository(session).get(user.id, fast)
        assert (row.scheduled_weekday, row.is_enabled) == (3, False)

    def test_empty_wake_time_clears(self, session, user):
        service = SettingsService(session)
        service.update(user.id, SettingsUpdate(wake_time="07:00"))
        assert service.update(user.id, SettingsUpdate()).wake_time == "07:00"
        assert service.update(user.id, SettingsUpdate(wake_time="")).wake_time is None

    def test_unknown_practice(self, session, user):
        with pytest.raises(HTTPException) as exc:
            SettingsService(session).update(user.id, SettingsUpdate(overrides=[OverrideUpdate(practice_id=999)]))
        assert exc.value.status_code == 404

    @pytest.mark.parametrize("value", ["25:00", "6:30", "noon"])
    def test_invalid_wake_time(self, value):
        with pytest.raises(ValueError):
            SettingsUpdate(wake_time=value)


# ======================================================================
# Rule overview
# ======================================================================


class TestRuleService:
    def test_grouped_by_season_in_order(self, session, user):
        seasons = [s.label for s in RuleService(session).get_rule(user.id).seasons]
        # Holy Week has no catalog entries of its own
        assert seasons == ["Advent", "Christmas", "Lent", "Easter", "Ordinary Time"]

    def test_schedule_labels(self, session, user, practice_ids):
        PracticeOverrideRepository(session).upsert(user.id, practice_ids["lent_friday_fast"],
                                                   {"scheduled_weekday": 3, "is_enabled": False})
        rule = RuleService(session).get_rule(user.id)
        lent = next(s for s in rule.seasons if s.label == "Lent")
        by_key = {p.key: p for p in lent.practices}
        assert by_key["lent_no_sweets"].schedule_label == "Daily"
        assert by_key["lent_stations"].schedule_label == "Weekly · Friday"
        assert by_key["lent_friday_fast"].schedule_label == "Weekly · Wednesday"
        assert by_key["lent_friday_fast"].is_enabled is False

    def test_catalog_weekday_label(self, session, user):
        rule = RuleService(session).get_rule(user.id)
        practice = next(p for s in rule.seasons for p in s.practices if p.key == "ot_sabbath")
        assert practice.schedule_label == "Weekly · Sunday"
        assert practice.lane_label == "Attention"


class TestScheduleLabel:
    def test_weekly_without_weekday(self):
        practice = Practice(id=1, key="k", season=Season.LENT, lane=Lane.PRAYER, title="T",
                            recurrence=Recurrence.WEEKLY, scheduled_weekday=None)
        assert schedule_label(resolve_practice(practice, None)) == "Weekly · unscheduled"


# ======================================================================
# History
# ======================================================================


class TestHistoryService:
    def test_month_counts(self, session, user, practice_ids, lent_friday):
        _complete(session, user, practice_ids["lent_no_sweets"], D(2026, 3, 5))
        _complete(session, user, practice_ids["lent_friday_fast"], D(2026, 3, 6))
        _complete(session, user, practice_ids["lent_no_sweets"], D(2026, 3, 6))

        response = HistoryService(session, clock=lent_friday).get_month(user.id, "2026-03")
        counts = {c.date: c.completed_count for c in response.cells if c.date}
        assert counts[D(2026, 3, 5)] == 1
        assert counts[D(2026, 3, 6)] == 2
        assert counts[D(2026, 3, 7)] == 0
        assert response.title == "March 2026"
        assert (response.prev_month, response.next_month) == ("2026-02", "2026-04")
        assert [c.date for c in response.cells if c.is_today] == [D(2026, 3, 6)]
        assert response.selected_items == []

    def test_selected_date(self, session, user, practice_ids, lent_friday):
        PracticeOverrideRepository(session).upsert(user.id, practice_ids["lent_friday_fast"],
                                                   {"custom_title": "Bread and water"})
        _complete(session, user, practice_ids["lent_friday_fast"], D(2026, 3, 6))

        response = HistoryService(session, clock=lent_friday).get_month(user.id, "2026-03", "2026-03-06")
        assert response.selected_date == D(2026, 3, 6)
        assert [(i.title, i.lane_label) for i in response.selected_items] == [("Bread and water", "Ascetic")]

    def test_invalid_month_defaults_to_current(self, session, user, lent_friday):
        response = HistoryService(session, clock=lent_friday).get_month(user.id, "2026-13", "2026-04-01")
        assert response.month == "2026-03"
        assert response.selected_date is None

    def test_other_users_are_not_counted(self, session, user, practice_ids, lent_friday):
        CompletionRepository(session).add(user.id + 1, practice_ids["lent_no_sweets"], D(2026, 3, 6),
                                          datetime.datetime(2026, 3, 6, 12, 0, tzinfo=datetime.timezone.utc))
        response = HistoryService(session, clock=lent_friday).get_month(user.id, "2026-03")
        assert sum(c.completed_count for c in response.cells) == 0


# ======================================================================
# Export
# ======================================================================


class TestExportService:
    def test_export_contents(self, session, user, practice_ids, lent_friday):
        fast = practice_ids["lent_friday_fast"]
        PracticeOverrideRepository(session).upsert(user.id, fast, {"scheduled_weekday": 3})
        _complete(session, user, fast, D(2026, 3, 4))

        service = ExportService(session, clock=lent_friday)
        payload = service.export(user)

        assert payload.user.email == "ana@example.com"
        assert len(payload.practices) == len(practice_ids)
        assert [(o.practice_id, o.scheduled_weekday) for o in payload.overrides] == [(fast, 3)]
        assert [(c.practice_id, c.date_local) for c in payload.completions] == [(fast, D(2026, 3, 4))]
        assert payload.settings is None
        assert service.filename() == "rule-of-life-export-2026-03-06.json"

    def test_export_keeps_row_timestamps(self, session, user, practice_ids, lent_friday):
        fast = practice_ids["lent_friday_fast"]
        PracticeOverrideRepository(session).upsert(user.id, fast, {"is_enabled": False})
        _complete(session, user, fast, D(2026, 3, 4))

        payload = ExportService(session, clock=lent_friday).export(user).model_dump()

        override = payload["overrides"][0]
        assert isinstance(override["created_at"], datetime.datetime)
        assert isinstance(override["updated_at"], datetime.datetime)
        completion = payload["completions"][0]
        assert isinstance(completion["created_at"], datetime.datetime)
        assert completion["completed_at"].replace(tzinfo=None) == datetime.datetime(2026, 3, 4, 12, 0)


# ======================================================================
# Accounts
# ======================================================================


class TestUserService:
    def test_register_normalizes_email(self, session):
        user = UserService(session).register(UserCreate(email="Ben@Example.COM", password="secret-pass"))
        assert user.email == "ben@example.com"
        assert user.hashed_password != "secret-pass"

    def test_duplicate_email_ignores_case(self, session, user):
        with pytest.raises(HTTPException) as excinfo:
            UserService(session).register(UserCreate(email="ANA@example.com", password="secret-pass"))
        assert excinfo.value.status_code == 400

    def test_token_carries_lifetime_and_subject(self, session):
        service = UserService(session)
        service.register(UserCreate(email="ben@example.com", password="secret-pass"))
        token = service.authenticate(UserLogin(email="Ben@example.com", password="secret-pass"))
        assert token.token_type == "bearer"
        assert token.expires_in > 0
        assert decode_access_token(token.access_token) == "ben@example.com"

    def test_wrong_password(self, session):
        service = UserService(session)
        service.register(UserCreate(email="ben@example.com", password="secret-pass"))
        with pytest.raises(HTTPException) as excinfo:
            service.authenticate(UserLogin(email="ben@example.com", password="not-the-pass"))
        assert excinfo.value.status_code == 401

    def test_get_active_user(self, session, user):
        service = UserService(session)
        assert service.get_active_user("Ana@Example.com").id == user.id
        assert service.get_active_user("nobody@example.com") is None

        user.is_active = False
        session.add(user)
        session.commit()
        assert service.get_active_user("ana@example.com") is None

    def test_normalize_email(self):
        assert normalize_email(" A@B.Org ") == "a@b.org"

    def test_exists_by_email(self, session, user):
        repo = UserRepository(session)
        assert repo.exists_by_email("ANA@example.com")
        assert not repo.exists_by_email("ben@example.com")
