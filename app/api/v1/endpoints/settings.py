"""
Settings endpoints.

Wake time and weekly practice overrides.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.settings import SettingsResponse, SettingsUpdate
from app.services.settings_service import SettingsService

router = APIRouter()


@router.get("", summary="Current settings.", response_model=SettingsResponse)
def get_settings(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return SettingsService(db).get(user.id)


@router.put("", summary="Save wake time and practice overrides.", response_model=SettingsResponse)
def update_settings(data: SettingsUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return SettingsService(db).update(user.id, data)
