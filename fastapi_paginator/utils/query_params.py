"""Helpers for pagination query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def parse_page_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the ``page[...]`` query parameter family.

    ``{"page[number]": "2", "page[size]": "5", "q": "x"}`` becomes
    ``{"page": {"number": 2, "size": 5}}``. Values that are not integers are
    kept as strings so the pagination class can decide how to fall back.
    """
    normalized: dict[str, Any] = {"page": {}}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key.startswith("page[") and key.endswith("]"):
            page_key = key[len("page[") : -1]
            try:
                normalized["page"][page_key] = int(raw_value)
            except ValueError:
                normalized["page"][page_key] = raw_value

    return normalized
