import json
import math
from typing import Any, Mapping


def to_compact_json(value: Any) -> str:
    # compact, raw unicode, insertion order; non-finite numbers become null
    return json.dumps(_finite_or_none(value), separators = (",", ":"), ensure_ascii = False, allow_nan = False)


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Mapping):
        return {key: _finite_or_none(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_none(item) for item in value]
    return value


def merge_dicts(base: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow merge into a new dict, keys from `overrides` win."""
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def is_present(value: Any) -> bool:
    """Truthiness where containers count as present even when empty."""
    if isinstance(value, (Mapping, list, tuple, set)):
        return True
    return bool(value)
