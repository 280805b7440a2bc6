"""Shared helpers for record models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar
from uuid import uuid4

import pydantic
from pydantic import BaseModel

from mission_control.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)
EnumT = TypeVar("EnumT", bound=StrEnum)


def new_id() -> str:
    """Generate an opaque, never-reused record id."""
    return str(uuid4())


def parse_payload(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Validate ``data`` against ``model``, raising the domain ValidationError."""
    try:
        return model.model_validate(dict(data))
    except pydantic.ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}" for error in e.errors()
        )
        raise ValidationError(problems) from e


def require_text(value: str | None, field: str) -> str:
    """Reject missing or whitespace-only text."""
    if value is None or not value.strip():
        raise ValueError(f"{field} must not be empty")
    return value


def coerce_enum(enum_cls: type[EnumT], value: Any, field: str) -> EnumT:
    """Parse ``value`` into ``enum_cls``, raising the domain ValidationError."""
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"invalid {field} {value!r}; expected one of {allowed}") from e
