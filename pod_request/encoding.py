from collections.abc import Mapping
from typing import Any

import httpx


def flatten_params(data: Mapping[str, Any], prefix: str | None = None) -> list[tuple[str, Any]]:
    """Flatten nested mappings and sequences into bracketed keys.

    ``{"a": {"b": 1}, "c": [1, 2]}`` becomes
    ``[("a[b]", 1), ("c[0]", 1), ("c[1]", 2)]``.
    """
    pairs: list[tuple[str, Any]] = []
    for key, value in data.items():
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        pairs.extend(_flatten_value(name, value))
    return pairs


def _flatten_value(name: str, value: Any) -> list[tuple[str, Any]]:
    if isinstance(value, Mapping):
        return flatten_params(value, prefix=name)
    if isinstance(value, (list, tuple)):
        pairs: list[tuple[str, Any]] = []
        for index, item in enumerate(value):
            pairs.extend(_flatten_value(f"{name}[{index}]", item))
        return pairs
    return [(name, value)]


def encode_form(data: Mapping[str, Any]) -> str:
    # Spaces as %20; a literal "+" is already escaped as %2B.
    return str(httpx.QueryParams(flatten_params(data))).replace("+", "%20")
