"""Raw form data -> validated form models"""

from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from calc_hub.domain.exceptions import InvalidInputError

FormT = TypeVar("FormT", bound=BaseModel)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "form"


def _describe(errors: List[Dict[str, str]]) -> str:
    return "; ".join(f"{err['field']}: {err['message']}" for err in errors)


def parse_form(schema: Type[FormT], raw: Mapping[str, Any]) -> FormT:
    """
    Validate raw form input against ``schema``.

    Raises:
        InvalidInputError: any field missing, blank, non-numeric or out of range.
            The error lists every offending field, not just the first one.
    """
    try:
        return schema.model_validate(dict(raw))
    except ValidationError as e:
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        first = errors[0]["field"] if errors else None
        raise InvalidInputError(_describe(errors), field=first, errors=errors) from e
