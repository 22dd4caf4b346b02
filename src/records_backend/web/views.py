"""
Web client pages - employee record list and create/edit form
All data goes through RecordApiClient. Failed API calls are logged and the
page carries on: the list renders empty, the form renders blank, and a
submit always returns to the list whatever the outcome.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..models.record import Level
from .api_client import RecordApiClient

router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

LEVELS = [level.value for level in Level]
BLANK_FORM = {"name": "", "position": "", "level": ""}


def get_api_client(request: Request) -> RecordApiClient:
    return request.app.state.api_client


def _to_list():
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def record_list(request: Request, api: RecordApiClient = Depends(get_api_client)):
    """Table of all records with edit and delete actions"""
    records = []
    try:
        records = await api.list_records()
        logger.info(f"Fetched {len(records)} records")
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch records: {e}")

    return templates.TemplateResponse(request, "record_list.html", {"records": records})


@router.get("/create", response_class=HTMLResponse)
async def new_record_form(request: Request):
    return _render_form(request, dict(BLANK_FORM), record_id=None)


@router.get("/edit/{record_id}", response_class=HTMLResponse)
async def edit_record_form(
    request: Request,
    record_id: str,
    api: RecordApiClient = Depends(get_api_client)
):
    """Form pre-filled with an existing record; blank if it cannot be fetched"""
    form = dict(BLANK_FORM)
    try:
        record = await api.get_record(record_id)
        form.update({key: record.get(key) or "" for key in BLANK_FORM})
    except httpx.HTTPError as e:
        logger.error(f"An error has occurred fetching record {record_id}: {e}")

    return _render_form(request, form, record_id=record_id)


@router.post("/create")
async def submit_new_record(
    name: str = Form(""),
    position: str = Form(""),
    level: str = Form(""),
    api: RecordApiClient = Depends(get_api_client)
):
    await _save(api, None, {"name": name, "position": position, "level": level})
    return _to_list()


@router.post("/edit/{record_id}")
async def submit_existing_record(
    record_id: str,
    name: str = Form(""),
    position: str = Form(""),
    level: str = Form(""),
    api: RecordApiClient = Depends(get_api_client)
):
    await _save(api, record_id, {"name": name, "position": position, "level": level})
    return _to_list()


@router.post("/delete/{record_id}")
async def delete_record(record_id: str, api: RecordApiClient = Depends(get_api_client)):
    try:
        await api.delete_record(record_id)
    except httpx.HTTPError as e:
        logger.error(f"Failed to delete record {record_id}: {e}")
    return _to_list()


async def _save(api: RecordApiClient, record_id: Optional[str], person: Dict[str, str]):
    # Errors are only logged; the caller redirects to the list either way
    try:
        if record_id is None:
            await api.create_record(person)
        else:
            await api.update_record(record_id, person)
    except httpx.HTTPError as e:
        logger.error(f"A problem occurred adding or updating a record: {e}")


def _render_form(request: Request, form: Dict[str, str], record_id: Optional[str]):
    action = "/create" if record_id is None else f"/edit/{record_id}"
    return templates.TemplateResponse(
        request,
        "record_form.html",
        {"form": form, "action": action, "levels": LEVELS, "is_new": record_id is None},
    )
