"""
Live search WebSocket.

Protocol: every text frame from the client is the full search box value.
The server answers with a DirectoryView JSON frame on connect and once per
quiet period after typing stops.
"""
from __future__ import annotations

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from alumni.config import SEARCH_DEBOUNCE_MS
from alumni.api.dependencies import current_store
from alumni.api.search_session import SearchSession
from alumni.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["search"])


@router.websocket("/ws/search")
async def live_search(websocket: WebSocket):
    await websocket.accept()
    store = current_store()
    if store is None:
        await websocket.close(code=1013, reason="Server not initialized yet")
        return

    session = SearchSession(store, websocket.send_json, delay=SEARCH_DEBOUNCE_MS / 1000)
    await websocket.send_json(session.current_view())
    try:
        while True:
            session.on_input(await websocket.receive_text())
    except WebSocketDisconnect:
        logger.debug("search_disconnected", query=session.query)
    finally:
        session.close()
