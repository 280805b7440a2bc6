"""Shared utilities for API routes."""

from __future__ import annotations

from typing import Any

from fastapi import Request

from mission_control import MissionControl
from mission_control.exceptions import ValidationError


def get_mission_control(request: Request) -> MissionControl:
    """Get the process-wide MissionControl handle attached at app creation."""
    return request.app.state.mission_control


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(body: dict[str, Any], *fields: str) -> None:
    """Boundary check for required fields. The stores validate again on write."""
    if any(_is_blank(body.get(field)) for field in fields):
        verb = "is" if len(fields) == 1 else "are"
        raise ValidationError(f"{' and '.join(fields)} {verb} required")
