"""JSON helpers: encode values and rebuild typed instances positionally."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Callable, TypeVar

from objtasks.config import ObjtasksConfig

__all__ = ["serialize", "deserialize"]

T = TypeVar("T")

_DEFAULT_CONFIG = ObjtasksConfig()


def _encode_object(value: Any) -> Any:
    """Fallback for values the JSON encoder does not know.

    Enum members encode as their value, dataclasses as their fields in
    declaration order, other instances as their public, non-callable
    attributes in insertion order. Classes and callables are rejected.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, type) or callable(value):
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    attrs = getattr(value, "__dict__", None)
    if attrs is None:
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )
    return {
        key: item
        for key, item in attrs.items()
        if not key.startswith("_") and not callable(item)
    }


def serialize(value: Any, *, config: ObjtasksConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    >>> serialize([1, 2, 3])
    '[1,2,3]'
    >>> serialize({"width": 10, "height": 20})
    '{"width":10,"height":20}'
    """
    cfg = config or _DEFAULT_CONFIG
    return json.dumps(
        value,
        indent=cfg.indent,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
        default=_encode_object,
    )


def deserialize(factory: Callable[..., T], text: str) -> T:
    """Build an instance by passing the decoded values to *factory* positionally.

    An object supplies its values in encoded order, an array its elements,
    and a scalar itself as the only argument. Field names are ignored, so
    *factory* must take its parameters in the encoded order.
    ``json.JSONDecodeError`` propagates for malformed *text*.
    """
    data = json.loads(text)
    if isinstance(data, dict):
        return factory(*data.values())
    if isinstance(data, list):
        return factory(*data)
    return factory(data)
