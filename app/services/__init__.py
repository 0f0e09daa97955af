"""Business logic services."""

from app.services.user_service import UserService
from app.services.today_service import TodayService
from app.services.completion_service import CompletionService
from app.services.settings_service import SettingsService
from app.services.rule_service import RuleService
from app.services.history_service import HistoryService
from app.services.export_service import ExportService

__all__ = [
    "UserService",
    "TodayService",
    "CompletionService",
    "SettingsService",
    "RuleService",
    "HistoryService",
    "ExportService",
]
