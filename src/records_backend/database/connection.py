"""
Document store connection management
"""

import logging
from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient

logger = logging.getLogger(__name__)


class DocumentStore:
    """Single MongoDB connection shared by every request of one application"""

    def __init__(self, url: Optional[str], database_name: str):
        self.url = url
        self.database_name = database_name
        self._client: Optional[AsyncMongoClient] = None

    async def connect(self):
        """Open the client and verify the server answers a ping"""
        if not self.url:
            raise ValueError("DATABASE_URL environment variable is required")

        client = AsyncMongoClient(self.url)
        try:
            await client.admin.command("ping")
        except Exception:
            await client.close()
            raise
        self._client = client

        logger.info(f"Connected to document store, database '{self.database_name}'")

    def collection(self, name: str):
        if self._client is None:
            raise RuntimeError("Document store not connected")
        return self._client[self.database_name][name]

    async def ping(self) -> bool:
        if self._client is None:
            return False
        await self._client.admin.command("ping")
        return True

    async def close(self):
        if self._client is not None:
            await self._client.close()
            self._client = None
        logger.info("Document store connection closed")


def get_document_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store opened by the lifespan"""
    return request.app.state.store
