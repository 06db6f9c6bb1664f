"""Settings document endpoints: view, export and import sections."""

from fastapi import APIRouter, Body, Header, HTTPException, Request

import config
from api.errors import http_error
from engine.errors import GeneratorError
from engine.settings_store import export_section, import_section, save_settings

router = APIRouter()


@router.get("")
def get_settings(request: Request) -> dict:
    """The whole settings document, with camelCase keys as stored."""
    return request.app.state.settings.model_dump(mode="json", by_alias=True)


@router.get("/{section}")
def get_section(section: str, request: Request) -> dict:
    """Export one section in the shape accepted by PUT."""
    try:
        return export_section(request.app.state.settings, section)
    except GeneratorError as e:
        raise http_error(e)


@router.put("/{section}")
def put_section(
    section: str,
    request: Request,
    data: dict = Body(...),
    x_admin_secret: str = Header(..., alias="X-Admin-Secret"),
) -> dict:
    """Replace one section and persist the document.

    Requires the X-Admin-Secret header. The new snapshot is used by every
    request that starts after this one returns.
    """
    if x_admin_secret != config.ADMIN_SECRET:
        raise HTTPException(status_code=403, detail="Invalid admin secret")

    try:
        updated = import_section(request.app.state.settings, section, data)
    except GeneratorError as e:
        raise http_error(e)

    save_settings(updated, config.SETTINGS_FILE)
    request.app.state.settings = updated
    return export_section(updated, section)
