"""Reading request bodies into plain mappings and text fields."""

from __future__ import annotations

from typing import Any, Mapping

from flask import request

from officetools.domain.errors import ToolInputError


def json_body() -> Mapping[str, Any]:
    """The JSON object sent with the request, or ``{}`` when there is none."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ToolInputError('Request body must be a JSON object')
    return data


def request_data() -> Mapping[str, Any]:
    """JSON object body when one was sent, else the submitted form."""
    data = json_body()
    return data or request.form


def text_field(data: Mapping[str, Any], key: str, default: str = '', strip: bool = True) -> str:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, (Mapping, list, tuple)):
        raise ToolInputError(f'{key} must be text')
    text = str(value)
    return text.strip() if strip else text
