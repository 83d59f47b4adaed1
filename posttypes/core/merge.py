from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if _is_sequence(value):
        return [_copy(v) for v in value]
    return value


def _merge_value(default: Any, override: Any) -> Any:
    if isinstance(default, Mapping) and isinstance(override, Mapping):
        return merge_options(default, override)
    if _is_sequence(default) and _is_sequence(override):
        return _merge_sequences(default, override)
    return _copy(override)


def _merge_sequences(defaults: Sequence[Any], overrides: Sequence[Any]) -> List[Any]:
    out = [_copy(v) for v in defaults]
    for i, value in enumerate(overrides):
        if i < len(out):
            out[i] = _merge_value(out[i], value)
        else:
            out.append(_copy(value))
    return out


def merge_options(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively replace ``defaults`` with ``overrides``.

    Nested maps merge key by key; sequences merge by position; anything else
    in ``overrides`` replaces the default outright. Neither input is mutated.
    """
    out: Dict[str, Any] = {k: _copy(v) for k, v in (defaults or {}).items()}
    for key, value in (overrides or {}).items():
        if key in out:
            out[key] = _merge_value(out[key], value)
        else:
            out[key] = _copy(value)
    return out
