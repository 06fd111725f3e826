from __future__ import annotations

import dataclasses
import typing as t

from ..errors import TwsortUserError


class ConfigError(TwsortUserError):
    """Invalid configuration value. `path` is the dotted location of the offending field."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any) -> _T:
    """
    Build a dataclass instance from raw YAML data, coercing every field
    according to its type hint.

    Raises:
        ConfigError: Unknown keys, missing required fields or wrong value types
    """
    return t.cast(_T, _build_dataclass(cls, data, path=()))


def _build_dataclass(cls: type, data: t.Any, path: tuple[str, ...]):
    if not isinstance(data, dict):
        raise ConfigError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)

    fields = dataclasses.fields(cls)
    extras = set(data) - {f.name for f in fields}
    if extras:
        raise ConfigError(f"unexpected keys: {sorted(extras)!r}", path)

    # hints resolve the string annotations left by `from __future__ import annotations`
    hints = t.get_type_hints(cls)
    kwargs = {}
    for f in fields:
        if f.name in data:
            kwargs[f.name] = coerce(data[f.name], hints.get(f.name, t.Any), (*path, f.name))
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise ConfigError("required field missing", (*path, f.name))
    return cls(**kwargs)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Check/convert one value against a type hint, recursing into lists and unions."""
    if hint is t.Any:
        return value

    origin = t.get_origin(hint)
    args = t.get_args(hint)

    # Optional[T] / Union[...]
    if origin is t.Union:
        if value is None and type(None) in args:
            return None
        errors: list[ConfigError] = []
        for option in args:
            if option is type(None):
                continue
            try:
                return coerce(value, option, path)
            except ConfigError as e:
                errors.append(e)
        raise errors[-1] if errors else ConfigError("no matching type", path)

    # YAML gives real booleans; a string like "no" is rejected rather than guessed
    if hint is bool:
        if isinstance(value, bool):
            return value
        raise ConfigError(f"expected bool, got {type(value).__name__}", path)

    if hint is str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise ConfigError(f"expected str, got {type(value).__name__}", path)

    if hint in (int, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"expected {hint.__name__}, got {type(value).__name__}", path)
        return hint(value)

    if origin is list:
        (elem_t,) = args or (t.Any,)
        if not isinstance(value, list):
            raise ConfigError(f"expected list, got {type(value).__name__}", path)
        return [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]

    if dataclasses.is_dataclass(hint):
        return _build_dataclass(hint, value, path)

    if isinstance(hint, type) and not isinstance(value, hint):
        raise ConfigError(f"expected {hint.__name__}, got {type(value).__name__}", path)
    return value


__all__ = ["ConfigError", "build_typed", "coerce"]
