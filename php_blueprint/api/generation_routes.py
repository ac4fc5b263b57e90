"""
Generation API

Runs plan generation for the current spec and exposes the session's
generation state and debug snapshot.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from php_blueprint.api.dependencies import get_session
from php_blueprint.core.errors import GenerationInProgressError
from php_blueprint.services.session import BlueprintSession

logger = logging.getLogger("blueprint.api.generation")

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate")
async def generate_plan(session: BlueprintSession = Depends(get_session)):
    try:
        outcome = await session.generate()
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not outcome.succeeded:
        # Detail was logged by the orchestrator; the user gets the generic message
        raise HTTPException(status_code=502, detail=outcome.error)

    return {
        "state": outcome.state.value,
        "plan": outcome.plan,
        "record": outcome.record.to_record() if outcome.record else None,
    }


@router.get("/generation")
async def get_generation(session: BlueprintSession = Depends(get_session)):
    generation = session.generation
    return {
        "state": generation.state.value,
        "plan": generation.plan,
        "error": generation.error,
        "hasDebug": generation.debug is not None,
    }


@router.get("/generation/debug")
async def get_debug_snapshot(session: BlueprintSession = Depends(get_session)):
    debug = session.generation.debug
    if debug is None:
        raise HTTPException(status_code=404, detail="No debug information for the current plan")
    return debug.model_dump(by_alias=True)
