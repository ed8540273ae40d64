"""User Input Rules — required-field check applied before any repository call.

Invariants:
    - id and name must be non-empty strings; email is unchecked
    - Pure: no IO, raises ValidationError or returns None
"""

from light_api.core.errors import ValidationError


def check_required_fields(user_id: str, name: str) -> None:
    """Raise ValidationError naming every empty required field."""
    missing = [
        field for field, value in (("id", user_id), ("name", name))
        if not value
    ]
    if missing:
        raise ValidationError(missing)
