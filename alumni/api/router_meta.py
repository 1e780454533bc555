"""
Meta endpoints: health, detected headers, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from alumni.config import active_schema, schema_label
from alumni.data.loader import load_directory
from alumni.data.normalize import resolution_report
from alumni.data.store import DirectoryStore
from alumni.api.dependencies import get_store
from alumni.api.response_models import HealthResponse, HeadersResponse

router = APIRouter(prefix="/api", tags=["meta"])


def _health(store: DirectoryStore) -> HealthResponse:
    return HealthResponse(
        status=store.status.value,
        message=store.message,
        records=store.row_count(),
        headers=len(store.headers),
        schema_version=schema_label(),
    )


@router.get("/health", response_model=HealthResponse)
def health(store: DirectoryStore = Depends(get_store)):
    return _health(store)


@router.get("/headers", response_model=HeadersResponse)
def detected_headers(store: DirectoryStore = Depends(get_store)):
    """Headers from the last load and which schema field each one feeds."""
    fields = resolution_report(store.headers, active_schema())
    used = {f["header"] for f in fields if f["header"] is not None}
    return HeadersResponse(
        headers=list(store.headers),
        fields=fields,
        unmatched_headers=[h for h in store.headers if h not in used],
    )


@router.post("/reload", response_model=HealthResponse)
async def reload_data(store: DirectoryStore = Depends(get_store)):
    """Re-fetch the sheet. A failed fetch keeps the previous records."""
    await load_directory(store)
    return _health(store)
