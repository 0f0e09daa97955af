"""
Data export schema.

Rows are exported with their stored timestamps so the document is a
complete copy of what the service keeps for the user.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.completion import CompletionResponse
from app.schemas.practice import Practice, PracticeOverride
from app.schemas.settings import UserSettingsExport


class ExportUser(BaseModel):
    id: int
    email: str


class ExportOverride(PracticeOverride):
    created_at: datetime.datetime
    updated_at: datetime.datetime


class ExportCompletion(CompletionResponse):
    created_at: datetime.datetime


class ExportResponse(BaseModel):
    """Everything stored for one user, as a single JSON document."""

    exported_at: datetime.datetime
    user: ExportUser
    practices: list[Practice]
    overrides: list[ExportOverride]
    settings: Optional[UserSettingsExport] = None
    completions: list[ExportCompletion]
