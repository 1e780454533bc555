"""
Directory endpoints: search results and Excel export.
"""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from alumni.config import EXPORT_FOLDER
from alumni.data.schemas import LoadStatus
from alumni.data.store import DirectoryStore
from alumni.api.dependencies import get_store
from alumni.api.response_models import DirectoryView
from alumni.reports import directory_report

router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=DirectoryView)
def list_people(
    q: str = Query("", description="Case-insensitive substring search"),
    store: DirectoryStore = Depends(get_store),
):
    view = store.fork().set_query(q)
    return directory_report.generate_json(view)


@router.get("/export")
def export_people(
    q: str = Query("", description="Case-insensitive substring search"),
    store: DirectoryStore = Depends(get_store),
):
    """Excel workbook of the people matching ``q``."""
    if store.status == LoadStatus.ERROR and not store.raw:
        raise HTTPException(503, store.message)

    view = store.fork().set_query(q)
    out_path = EXPORT_FOLDER / f"Alumni_Directory_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    directory_report.generate_excel(view, out_path)
    return FileResponse(
        path=str(out_path),
        filename=out_path.name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
