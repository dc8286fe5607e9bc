from __future__ import annotations

from ..core.enums import Action
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    """Reject missing/blank text; the value itself is returned untouched."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def parse_action(value: Action | str) -> Action:
    if isinstance(value, Action):
        return value
    try:
        return Action(value)
    except ValueError:
        raise ValidationError(f"Invalid action {value!r}") from None
