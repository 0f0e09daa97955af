"""Pydantic schemas for request/response validation."""

from app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from app.schemas.practice import (
    EffectivePractice,
    Lane,
    Practice,
    PracticeCreate,
    PracticeOverride,
    Recurrence,
    RuleResponse,
    Season,
    UpcomingPracticeResponse,
)
from app.schemas.liturgical import LiturgicalDay
from app.schemas.completion import CompletionResponse, HistoryMonthResponse, ToggleResponse
from app.schemas.settings import OverrideUpdate, SettingsResponse, SettingsUpdate
from app.schemas.today import ChecklistGroup, ChecklistItem, TodayResponse, VerseResponse
from app.schemas.export import ExportResponse

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "EffectivePractice",
    "Lane",
    "Practice",
    "PracticeCreate",
    "PracticeOverride",
    "Recurrence",
    "RuleResponse",
    "Season",
    "UpcomingPracticeResponse",
    "LiturgicalDay",
    "CompletionResponse",
    "HistoryMonthResponse",
    "ToggleResponse",
    "OverrideUpdate",
    "SettingsResponse",
    "SettingsUpdate",
    "ChecklistGroup",
    "ChecklistItem",
    "TodayResponse",
    "VerseResponse",
    "ExportResponse",
]
