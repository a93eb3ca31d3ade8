"""
Closed-schema validation shared by every scenario variant.

Each variant supplies its own allowed and required key sets; the checks
themselves live here once.
"""
from __future__ import annotations

import json
from typing import AbstractSet, Any

from loadsim.domain.errors import SchemaError


def _render(element: Any) -> str:
    return json.dumps(element, sort_keys=True)


def parse_json(text: str) -> Any:
    """
    Parse JSON text into a tree of dicts, lists and scalars.

    Raises
    ------
    SchemaError
        If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise SchemaError(f"Malformed JSON string: {exc}") from exc


def validate_json_element(
    element: Any,
    *,
    type_name: str,
    fields: AbstractSet[str],
    required: AbstractSet[str],
) -> None:
    """
    Validate a parsed JSON element against a closed schema.

    Parameters
    ----------
    element : Any
        Parsed JSON value (``None`` stands for JSON ``null``).
    type_name : str
        Name of the record type, used in error messages.
    fields : AbstractSet[str]
        Every key the object may contain.
    required : AbstractSet[str]
        Keys that must be present and non-null.

    Raises
    ------
    SchemaError
        On a null root with required fields, a non-object root, an unknown key,
        or a missing required key.
    """
    if element is None:
        if required:
            raise SchemaError(
                f"The required field(s) {sorted(required)} in {type_name} "
                "is not found in the empty JSON string"
            )
        return

    if not isinstance(element, dict):
        raise SchemaError(f"Expected a JSON object for {type_name}, got: {_render(element)}")

    for key in element:
        if key not in fields:
            raise SchemaError(
                f"The field `{key}` in the JSON string is not defined in the "
                f"`{type_name}` properties. JSON: {_render(element)}"
            )

    for key in sorted(required):
        if element.get(key) is None:
            raise SchemaError(
                f"The required field `{key}` is not found in the JSON string: {_render(element)}"
            )


__all__ = ["parse_json", "validate_json_element"]
