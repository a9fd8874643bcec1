"""Flatten tagged dataclasses into request parameters."""

from __future__ import annotations

import dataclasses
import json
import math
from decimal import Decimal
from typing import Any, Mapping

from nacoskit import logger

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _marshal_map(value: Mapping[Any, Any]) -> str | None:
    try:
        text = json.dumps(
            dict(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError) as exc:
        log = logger.get_logger()
        if log is not None:
            log.error("[TransformObject2Param] json.Marshal err:%s", exc)
        return None
    return text.translate(_JSON_ESCAPES)


def _format(value: Any) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        return _marshal_map(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ",".join(value) or None
    return None


def transform_object_to_param(obj: Any) -> dict[str, str]:
    """Map every field tagged with ``param`` metadata to its string form.

    Empty strings, empty string lists and missing maps are left out; fields of
    other kinds are ignored.
    """
    params: dict[str, str] = {}
    if obj is None:
        return params
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    for f in dataclasses.fields(obj):
        tag = f.metadata.get("param", "")
        if not tag or tag == "-":
            continue
        text = _format(getattr(obj, f.name))
        if text is not None:
            params[tag] = text
    return params