"""
Export endpoint.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlmodel import Session

from app.api.dependencies import get_clock, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.rule.clock import LocalClock
from app.services.export_service import ExportService

router = APIRouter()


@router.get("", summary="Download all of your data as JSON.")
def export_data(db: Session = Depends(get_db), user: User = Depends(get_current_user),
                clock: LocalClock = Depends(get_clock), ):
    service = ExportService(db, clock=clock)
    payload = service.export(user)
    return Response(content=payload.model_dump_json(indent=2), media_type="application/json; charset=utf-8",
                    headers={ "content-disposition": f'attachment; filename="{service.filename()}"' }, )
