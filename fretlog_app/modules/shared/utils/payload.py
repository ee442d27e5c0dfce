# File: fretlog_app/modules/shared/utils/payload.py
# Helpers turning JSON request bodies into validated pydantic payloads.
# Every failure raises ValidationError so the API answers with a 400 envelope.

from __future__ import annotations

from typing import Sequence, Type, TypeVar

from flask import current_app, request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fretlog_app.core.error_handlers import ValidationError

PayloadT = TypeVar('PayloadT', bound=BaseModel)


def get_json_object() -> dict:
    """Return the request body as a dict or raise ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def format_errors(exc: PydanticValidationError) -> dict[str, str]:
    """Flatten pydantic errors into ``{"records.0.date": "message"}``."""
    errors = {}
    for error in exc.errors():
        key = '.'.join(str(part) for part in error.get('loc', ())) or '__root__'
        errors[key] = error.get('msg', 'invalid')
    return errors


def parse_payload(model: Type[PayloadT], data: dict | None = None,
                  limited: Sequence[str] = ()) -> PayloadT:
    """
    Validate ``data`` (the request body by default) against ``model``.

    Args:
        model: pydantic model describing the payload
        data: already-decoded body; read from the request when None
        limited: list fields capped by MAX_RECORDS_PER_REQUEST, checked
            before any item is validated

    Returns:
        The validated model instance.
    """
    if data is None:
        data = get_json_object()
    for field in limited:
        items = data.get(field)
        if isinstance(items, list):
            ensure_within_limit(items, field)
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError('Invalid request payload', errors=format_errors(exc))


def ensure_within_limit(items: list, field: str) -> None:
    """Reject payloads carrying more items than MAX_RECORDS_PER_REQUEST."""
    limit = current_app.config.get('MAX_RECORDS_PER_REQUEST', 5000)
    if len(items) > limit:
        raise ValidationError(
            f'Too many items in "{field}" (max {limit})',
            errors={field: len(items)},
        )
