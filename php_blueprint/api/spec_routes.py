"""
Spec API

FastAPI router for editing the project spec: field patches, list edits,
framework switches (with presets), import/export and the option catalogs.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel

from php_blueprint.api.dependencies import get_session
from php_blueprint.core.errors import (
    ImportFormatInvalidError,
    SpecValidationError,
    UnknownSpecFieldError,
)
from php_blueprint.models.options import get_option_catalog
from php_blueprint.prompts.framework_presets import list_presets
from php_blueprint.services.session import BlueprintSession
from php_blueprint.services.spec_transfer import export_content_disposition, export_document

logger = logging.getLogger("blueprint.api.spec")

router = APIRouter(prefix="/api", tags=["spec"])


# ============================================================================
# Pydantic Models
# ============================================================================

class ListFieldUpdate(BaseModel):
    values: List[str]


class MembershipToggle(BaseModel):
    value: str
    present: bool


class FrameworkChange(BaseModel):
    framework: str


# ============================================================================
# Routes
# ============================================================================

@router.get("/spec")
async def get_spec(session: BlueprintSession = Depends(get_session)):
    return session.config.spec.to_record()


@router.patch("/spec")
async def update_spec(patch: Dict[str, Any], session: BlueprintSession = Depends(get_session)):
    try:
        return session.config.update(patch).to_record()
    except UnknownSpecFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SpecValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/spec/reset")
async def reset_spec(session: BlueprintSession = Depends(get_session)):
    return session.config.reset().to_record()


@router.put("/spec/lists/{field}")
async def set_list_field(
    field: str,
    body: ListFieldUpdate,
    session: BlueprintSession = Depends(get_session),
):
    try:
        return session.config.set_list_field(field, body.values).to_record()
    except UnknownSpecFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/spec/lists/{field}/toggle")
async def toggle_list_member(
    field: str,
    body: MembershipToggle,
    session: BlueprintSession = Depends(get_session),
):
    try:
        return session.config.toggle_set_membership(field, body.value, body.present).to_record()
    except UnknownSpecFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/spec/framework")
async def change_framework(body: FrameworkChange, session: BlueprintSession = Depends(get_session)):
    return session.config.change_framework(body.framework).to_record()


@router.post("/spec/import")
async def import_spec(request: Request, session: BlueprintSession = Depends(get_session)):
    """Merge an uploaded spec JSON document (raw request body) over the current spec."""
    document = await request.body()
    try:
        return session.config.import_spec(document).to_record()
    except ImportFormatInvalidError as e:
        logger.warning(f"[API] Rejected spec import: {e}")
        raise HTTPException(status_code=400, detail=e.user_message)


@router.get("/spec/export")
async def export_spec(session: BlueprintSession = Depends(get_session)):
    spec = session.config.spec
    return Response(
        content=export_document(spec),
        media_type="application/json",
        headers={"Content-Disposition": export_content_disposition(spec)},
    )


@router.get("/options")
async def get_options():
    return get_option_catalog()


@router.get("/presets")
async def get_presets():
    return list_presets()
