"""
Employee record API routes
Thin adapters from HTTP to RecordsService. Not found, malformed ids and
store failures each map to their own status code.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...models.record import (
    DeleteResultResponse,
    InsertResultResponse,
    RecordDraft,
    RecordResponse,
    UpdateResultResponse,
)
from ...services.records_service import InvalidRecordIdError, RecordsService, get_records_service

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Record not found"
INVALID_ID = "Invalid record id"


@router.get("/", response_model=List[RecordResponse])
@router.get("", response_model=List[RecordResponse], include_in_schema=False)
async def list_records(service: RecordsService = Depends(get_records_service)):
    """Get a list of all the records"""
    try:
        documents = await service.list_all()
        return [RecordResponse.from_document(document) for document in documents]
    except Exception as e:
        logger.error(f"Failed to fetch records: {e}")
        raise HTTPException(status_code=500, detail="Error fetching records")


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(record_id: str, service: RecordsService = Depends(get_records_service)):
    """Get a single record by id"""
    try:
        document = await service.get_by_id(record_id)
        if document is None:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        return RecordResponse.from_document(document)
    except HTTPException:
        raise
    except InvalidRecordIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except Exception as e:
        logger.error(f"Failed to fetch record: {e}")
        raise HTTPException(status_code=500, detail="Error fetching record")


@router.post("/", status_code=201, response_model=InsertResultResponse)
@router.post("", status_code=201, response_model=InsertResultResponse, include_in_schema=False)
async def create_record(draft: RecordDraft, service: RecordsService = Depends(get_records_service)):
    """Create a new record"""
    try:
        result = await service.create(draft)
        return InsertResultResponse.from_result(result)
    except Exception as e:
        logger.error(f"Failed to create record: {e}")
        raise HTTPException(status_code=500, detail="Error creating record")


@router.patch("/{record_id}", response_model=UpdateResultResponse)
async def update_record(
    record_id: str,
    draft: RecordDraft,
    service: RecordsService = Depends(get_records_service)
):
    """Replace name, position and level of a record"""
    try:
        result = await service.update_by_id(record_id, draft)
    except InvalidRecordIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except Exception as e:
        logger.error(f"Failed to update record: {e}")
        raise HTTPException(status_code=500, detail="Error updating record")

    if result.matched_count == 0:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return UpdateResultResponse.from_result(result)


@router.delete("/{record_id}", response_model=DeleteResultResponse)
async def delete_record(record_id: str, service: RecordsService = Depends(get_records_service)):
    """Delete a record"""
    try:
        result = await service.delete_by_id(record_id)
    except InvalidRecordIdError:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except Exception as e:
        logger.error(f"Failed to delete record: {e}")
        raise HTTPException(status_code=500, detail="Error deleting record")

    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return DeleteResultResponse.from_result(result)
