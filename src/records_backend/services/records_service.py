"""
Records service - data access for employee records
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from ..database.connection import DocumentStore, get_document_store
from ..models.record import RecordDraft

logger = logging.getLogger(__name__)

RECORDS_COLLECTION = "records"


class RecordStoreError(Exception):
    """The document store failed or could not be reached"""


class InvalidRecordIdError(ValueError):
    """An external id that does not parse into an ObjectId"""

    def __init__(self, record_id: Any):
        super().__init__(f"Invalid record id: {record_id!r}")
        self.record_id = record_id


def parse_record_id(record_id: Any) -> ObjectId:
    # ObjectId(None) would mint a fresh id instead of failing
    if record_id is None:
        raise InvalidRecordIdError(record_id)
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError) as e:
        raise InvalidRecordIdError(record_id) from e


class RecordsService:
    """
    CRUD operations over the records collection.

    Not found is never an exception: get_by_id returns None and the write
    operations return the driver result, whose matched/deleted count is 0.
    Driver failures surface as RecordStoreError.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    @property
    def collection(self):
        return self.store.collection(RECORDS_COLLECTION)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Return every record in store order"""
        try:
            return await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise RecordStoreError(f"Failed to list records: {e}") from e

    async def get_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a record by its id

        Args:
            record_id: 24-character hex ObjectId string

        Returns:
            The stored document, or None when nothing matches
        """
        query = {"_id": parse_record_id(record_id)}
        try:
            return await self.collection.find_one(query)
        except PyMongoError as e:
            raise RecordStoreError(f"Failed to fetch record {record_id}: {e}") from e

    async def create(self, draft: RecordDraft) -> InsertOneResult:
        document = draft.to_document()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise RecordStoreError(f"Failed to create record: {e}") from e

        logger.info(f"Created record {result.inserted_id}")
        return result

    async def update_by_id(self, record_id: str, draft: RecordDraft) -> UpdateResult:
        """
        Replace name, position and level of a record

        Args:
            record_id: 24-character hex ObjectId string
            draft: New field values; missing fields are written as null

        Returns:
            UpdateResult; matched_count is 0 when no record has this id
        """
        query = {"_id": parse_record_id(record_id)}
        updates = {"$set": draft.to_document()}
        try:
            return await self.collection.update_one(query, updates)
        except PyMongoError as e:
            raise RecordStoreError(f"Failed to update record {record_id}: {e}") from e

    async def delete_by_id(self, record_id: str) -> DeleteResult:
        query = {"_id": parse_record_id(record_id)}
        try:
            return await self.collection.delete_one(query)
        except PyMongoError as e:
            raise RecordStoreError(f"Failed to delete record {record_id}: {e}") from e


def get_records_service(store: DocumentStore = Depends(get_document_store)) -> RecordsService:
    """FastAPI dependency building the service over the application's store"""
    return RecordsService(store)
