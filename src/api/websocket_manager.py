"""WebSocket fan-out for live dashboard views."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import WebSocket
from pydantic import BaseModel, Field

from mission_control.tasks import BoardSnapshot

logger = logging.getLogger(__name__)


class RealtimeEvent(BaseModel):
    """Schema for realtime events sent over WebSocket."""

    type: str = Field(..., description="Event type identifier, e.g., 'tasks.changed'")
    data: dict[str, Any] = Field(default_factory=dict, description="Structured event payload")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="ISO8601 UTC timestamp",
    )


class ConnectionManager:
    """Tracks active WebSocket connections and broadcasts events."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    @property
    def active(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
        logger.info(f"[WS] Client connected (active={len(self._connections)})")
        await websocket.send_text(RealtimeEvent(type="connected").model_dump_json())

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._connections.discard(websocket)
        logger.info(f"[WS] Client disconnected (active={len(self._connections)})")

    async def broadcast(self, event_type: str, data: dict[str, Any]) -> None:
        """Send one event to every client, pruning connections that fail."""
        if not self._connections:
            return
        text = RealtimeEvent(type=event_type, data=data).model_dump_json()
        stale: list[WebSocket] = []
        async with self._lock:
            targets = list(self._connections)
        for ws in targets:
            try:
                await ws.send_text(text)
            except Exception as e:
                logger.warning(f"[WS] Failed to send to a client: {e} (pruning)")
                stale.append(ws)
        if stale:
            async with self._lock:
                for ws in stale:
                    self._connections.discard(ws)
            logger.info(f"[WS] Pruned {len(stale)} stale connections (active={len(self._connections)})")

    async def broadcast_board(self, snapshot: BoardSnapshot) -> None:
        """Push a refreshed task board to every dashboard."""
        await self.broadcast(
            "tasks.changed",
            {
                "columns": {
                    status.value: [task.model_dump(mode="json", by_alias=True) for task in tasks]
                    for status, tasks in snapshot.columns.items()
                },
                "counts": snapshot.counts.model_dump(),
            },
        )
