"""
HTTP client the web pages use to talk to the record API
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class RecordApiClient:
    """Async wrapper over the /record endpoints; non-2xx raises httpx.HTTPStatusError"""

    def __init__(self, http_client: httpx.AsyncClient):
        self.http = http_client

    @classmethod
    def for_base_url(cls, base_url: str, timeout: float = 10.0) -> "RecordApiClient":
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout))

    async def list_records(self) -> List[Dict[str, Any]]:
        response = await self.http.get("/record/")
        response.raise_for_status()
        return response.json()

    async def get_record(self, record_id: str) -> Dict[str, Any]:
        response = await self.http.get(f"/record/{record_id}")
        response.raise_for_status()
        return response.json()

    async def create_record(self, record: Dict[str, Optional[str]]) -> Dict[str, Any]:
        response = await self.http.post("/record/", json=record)
        response.raise_for_status()
        return response.json()

    async def update_record(self, record_id: str, record: Dict[str, Optional[str]]) -> Dict[str, Any]:
        response = await self.http.patch(f"/record/{record_id}", json=record)
        response.raise_for_status()
        return response.json()

    async def delete_record(self, record_id: str) -> Dict[str, Any]:
        response = await self.http.delete(f"/record/{record_id}")
        response.raise_for_status()
        return response.json()

    async def aclose(self):
        await self.http.aclose()
