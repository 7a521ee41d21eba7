"""
Backup endpoints — JSON export and import of all app data.
"""

import datetime
import json
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlmodel import Session

from snoozy.api.dependencies import get_now
from snoozy.db.session import get_db
from snoozy.services.backup_service import BackupImportError, BackupService, BackupWriteError

router = APIRouter()


@router.get("/export", summary="Download all app data as JSON.")
def export_backup(db: Session = Depends(get_db), now: datetime.datetime = Depends(get_now), ):
    service = BackupService(db)
    filename = service.export_filename(now)
    return Response(content=service.export_json(now), media_type="application/json",
                    headers={ "Content-Disposition": f'attachment; filename="{filename}"' }, )


@router.post("/import", summary="Restore all app data from a JSON export.")
def import_backup(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db), ):
    """Replaces profile, settings and every sleep interval."""
    service = BackupService(db)
    try:
        document = service.import_json(json.dumps(payload))
    except BackupImportError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BackupWriteError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"imported_entries": len(document.sleep_entries)}
