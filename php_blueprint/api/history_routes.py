"""
History API

Lists, restores and deletes generation history entries.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from php_blueprint.api.dependencies import get_session
from php_blueprint.core.errors import GenerationInProgressError, HistoryRecordNotFoundError
from php_blueprint.services.session import BlueprintSession

logger = logging.getLogger("blueprint.api.history")

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("")
async def list_history(session: BlueprintSession = Depends(get_session)):
    records = [record.to_record() for record in session.history.records]
    return {"history": records, "total": len(records)}


@router.get("/{record_id}")
async def get_history_item(record_id: str, session: BlueprintSession = Depends(get_session)):
    record = session.history.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"History record not found: {record_id}")
    return record.to_record()


@router.post("/{record_id}/load")
async def load_history_item(record_id: str, session: BlueprintSession = Depends(get_session)):
    try:
        record = session.load_history_item(record_id)
    except HistoryRecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"spec": record.spec.to_record(), "plan": record.plan}


@router.delete("/{record_id}")
async def delete_history_item(record_id: str, session: BlueprintSession = Depends(get_session)):
    session.history.remove(record_id)
    return {"status": "success", "total": len(session.history)}


@router.delete("")
async def clear_history(confirm: bool = False, session: BlueprintSession = Depends(get_session)):
    """Clear all history. Requires ``?confirm=true``; the UI asks the user first."""
    cleared = session.history.clear(confirm=lambda: confirm)
    if not cleared:
        raise HTTPException(status_code=400, detail="Clearing history requires confirm=true")
    return {"status": "success", "total": 0}
