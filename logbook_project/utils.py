from rest_framework.response import Response

from .exceptions import ValidationError


def error_response(exc):
    """Render a ``LogbookError`` in the API's failure envelope."""
    payload = {
        "success": False,
        "message": exc.message,
        "code": exc.code,
    }
    if exc.details:
        payload["details"] = exc.details
    return Response(payload, status=exc.status_code)


def parse_id_list(value, field_name="ids"):
    """
    Normalise an incoming list of ids.

    Accepts a list (JSON body, items may be ids or ``{"id": ...}`` objects) or
    a comma separated string. Returns ``None`` when the value was not supplied
    so callers can tell "not provided" apart from "provided empty".
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    ids = []
    for item in value:
        if isinstance(item, dict):
            item = item.get("id")
        try:
            ids.append(int(item))
        except (TypeError, ValueError):
            raise ValidationError(
                f"{field_name} must be a list of ids.",
                details={"field": field_name, "value": str(item)},
            )
    return ids


def parse_id(value, field_name="id"):
    """A single integer id from a request value; ``None`` stays ``None``."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"{field_name} must be an id.",
            details={"field": field_name, "value": str(value)},
        )
