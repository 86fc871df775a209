from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_keys(payload: Any, field_name: str, *keys: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError(f"{field_name} must be an object")
    missing = [k for k in keys if k not in payload]
    if missing:
        raise ValidationError(f"{field_name} is missing: {', '.join(missing)}")
    return payload
