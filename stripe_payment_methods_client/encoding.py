"""Form encoding for request bodies.

The API takes ``application/x-www-form-urlencoded`` bodies and expresses nesting in the key:
``billing_details[address][city]=Berlin``, ``expand[0]=customer``.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


def encode_form(params: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a nested mapping into bracketed form fields, keeping the input order."""
    form: dict[str, str] = {}
    for key, value in params.items():
        _encode_value(form, key, value)
    return form


def _encode_value(form: dict[str, str], key: str, value: Any) -> None:
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(form, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _encode_value(form, f"{key}[{index}]", item)
    elif isinstance(value, bool):
        form[key] = "true" if value else "false"
    elif value is None:
        # an empty value unsets the field on the server
        form[key] = ""
    elif isinstance(value, Enum):
        form[key] = str(value.value)
    else:
        form[key] = str(value)
