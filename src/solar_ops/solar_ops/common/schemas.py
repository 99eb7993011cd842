"""Payload validation helpers built on pydantic.

Create payloads are validated against the full schema; patch payloads only
validate the keys the caller actually sent, so absent fields stay untouched.
Unknown keys are dropped in both cases.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError


class PayloadSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


_FIELD_CONFIG = ConfigDict(str_strip_whitespace=True)


def _error_details(exc: PydanticValidationError, *, prefix: str = "") -> list[dict]:
    details = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        if prefix:
            loc.insert(0, prefix)
        details.append({"field": ".".join(loc), "message": err.get("msg", "invalid value")})
    return details


def parse_payload(schema: type[PayloadSchema], payload: Any, *, message: str) -> dict[str, Any]:
    """Validate a create payload; returns only the fields the caller set."""
    if not isinstance(payload, Mapping):
        raise ValidationError(message, [{"field": "", "message": "expected a JSON object"}])
    try:
        model = schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(message, _error_details(exc)) from exc
    return model.model_dump(exclude_unset=True)


@lru_cache(maxsize=None)
def _field_adapter(schema: type[PayloadSchema], name: str) -> TypeAdapter:
    field = schema.model_fields[name]
    annotation = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]
    return TypeAdapter(annotation, config=_FIELD_CONFIG)


def parse_patch(schema: type[PayloadSchema], payload: Any, *, message: str) -> dict[str, Any]:
    """Validate a partial payload key by key against ``schema``'s fields."""
    if not isinstance(payload, Mapping):
        raise ValidationError(message, [{"field": "", "message": "expected a JSON object"}])

    clean: dict[str, Any] = {}
    errors: list[dict] = []
    for name, value in payload.items():
        if name not in schema.model_fields:
            continue
        try:
            clean[name] = _field_adapter(schema, name).validate_python(value)
        except PydanticValidationError as exc:
            errors.extend(_error_details(exc, prefix=name))

    if errors:
        raise ValidationError(message, errors)
    return clean
