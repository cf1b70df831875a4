# src/astrolabe/util/serialization.py

from dataclasses import fields, is_dataclass
from typing import Any, Dict, Mapping, Type, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------

def serialize(obj: Any) -> Dict[str, Any]:
    """Convert a flat record into a JSON-serializable dict."""
    return {f.name: getattr(obj, f.name) for f in fields(obj)}


# ---------------------------------------------------------------------------
# Deserializer
# ---------------------------------------------------------------------------

def _coerce_int(value: Any) -> int:
    # int() would accept True and truncate 1.9 to 1
    if isinstance(value, bool):
        raise TypeError("bool is not an integer value")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value!r} is not a whole number")
    return int(value)


def deserialize(data: Mapping[str, Any], cls: Type[T]) -> T:
    """
    Rebuild a flat record of primitive fields from a mapping.

    Every field must be present; extra keys are ignored. Values are coerced
    through the field's declared builtin type (int, float, str). Integer
    fields refuse bools and fractional floats rather than truncating them.
    """
    if not is_dataclass(cls):
        raise TypeError(f"deserialize() requires a dataclass type, got: {cls}")

    missing = [f.name for f in fields(cls) if f.name not in data]
    if missing:
        raise ValueError(f"{cls.__name__} is missing field(s): {', '.join(missing)}")

    kwargs = {}
    for f in fields(cls):
        value = data[f.name]
        ftype = _BUILTINS.get(f.type, f.type) if isinstance(f.type, str) else f.type
        coerce = _coerce_int if ftype is int else ftype

        if ftype in (int, float, str):
            try:
                kwargs[f.name] = coerce(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"{cls.__name__}.{f.name}: invalid value {value!r}") from e
        else:
            kwargs[f.name] = value

    return cls(**kwargs)


# Field annotations arrive as strings under `from __future__ import annotations`
_BUILTINS = {"int": int, "float": float, "str": str}
