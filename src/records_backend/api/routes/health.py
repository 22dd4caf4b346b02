"""
Health check API route
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from ...database.connection import DocumentStore, get_document_store

router = APIRouter()


@router.get("/health")
async def health_check(store: DocumentStore = Depends(get_document_store)):
    """Report healthy when the document store answers a ping"""
    try:
        connected = await store.ping()
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    if not connected:
        raise HTTPException(status_code=503, detail="Health check failed: document store not connected")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }
