from __future__ import annotations

import logging

from collections import ChainMap
from typing import Any, Callable, Iterable, Iterator, Optional

logger = logging.getLogger("charstream.config")


class ConfigError(Exception):
    """Exception class for Config related errors."""


class Option:
    """Config option.

    Used to define the schema. Immutable.

    Parameters:
        type: Option's type.
        default: Option's default value.
        required: If the option is required and not assigned, validation
                  fails.
        check: Predicate the assigned value must satisfy.
    """

    type: type
    default: Any
    required: bool
    check: Optional[Callable[[Any], bool]]

    def __init__(self, type, default=None, required=False, check=None):
        super().__setattr__('type', type)
        super().__setattr__('default', default)
        super().__setattr__('required', required)
        super().__setattr__('check', check)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError

    def __delattr__(self, name: str):
        raise AttributeError

    def __repr__(self):
        return (f"Option({self.type.__name__}, default={self.default!r}, "
                f"required={self.required})")


def _convert_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    int: int,
    bool: _convert_bool,
    str: str,
}


class Config:
    def __init__(self, schema: dict[str, Option], strict=True):
        """Initialize Config instance.

        Args:
            schema: Schema mapping.
            strict: If true, options that are not in the schema
                    are rejected.
        """
        self._config = ChainMap(schema)
        self.strict = strict

    @property
    def schema(self) -> dict[str, Option]:
        """Return the schema mapping."""
        return self._config.maps[-1]

    def override(self, options: dict[str, Any]) -> None:
        """Add a layer of already typed option values.

        Raises:
            ConfigError
        """
        self._try_insert_map(self._override, options, False)

    def parse(self, it: Iterable[str]) -> None:
        """Add a layer of options given as `name=value` strings.

        Values are converted to the option's type.

        Raises:
            ConfigError
        """
        options = {}
        for s in it:
            name, sep, value = s.partition('=')
            if not sep:
                raise ConfigError(f"expected name=value, got {s!r}")
            options[name.strip()] = value.strip()
        self._try_insert_map(self._override, options, True)

    def validate(self) -> None:
        """Check that every required option was assigned.

        Raises:
            ConfigError
        """
        missing = [name for name, value in self._config.items()
                   if isinstance(value, Option) and value.required]
        if missing:
            opts = ', '.join(repr(n) for n in missing)
            raise ConfigError(f"required options: {opts}")

    def clear(self) -> None:
        """Remove assigned options, preserving the schema."""
        self._config.maps = self._config.maps[-1:]

    @property
    def layers(self) -> int:
        """Total number of override layers."""
        return len(self._config.maps) - 1

    def _try_insert_map(self, fn: Callable, *args: Any):
        self._config.maps.insert(0, {})
        try:
            fn(*args)
        except Exception:
            self._config.maps.pop(0)
            raise

    def _override(self, options: dict[str, Any], convert: bool):
        for name, value in options.items():
            option = self.schema.get(name)
            if option is None:
                if self.strict:
                    raise ConfigError(f"unknown option {name!r}")
                self._config[name] = value
                continue

            if convert:
                value = self._convert(name, value, option)
            elif not isinstance(value, option.type):
                msg = (f"option {name!r} must be of type "
                       f"{option.type.__name__}, got {type(value).__name__}: "
                       f"{value!r}")
                raise ConfigError(msg)

            if option.check and not option.check(value):
                raise ConfigError(f"invalid value of option {name!r}: "
                                  f"{value!r}")

            logger.info("option %s = %r", name, value)
            self._config[name] = value

    def _convert(self, name: str, value: str, option: Option) -> Any:
        convert_fn = _CONVERTERS.get(option.type)
        if not convert_fn:
            raise ConfigError(f"cannot convert option {name!r}")
        try:
            return convert_fn(value)
        except ValueError as e:
            raise ConfigError(f"option {name!r}: {e}") from e

    def items(self) -> Iterator[tuple[str, Any]]:
        for name in self._config:
            yield name, getattr(self, name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        if name in self._config:
            value = self._config[name]
            if isinstance(value, Option):
                return value.default
            return value

        raise AttributeError(f"no such config value: {name!r}")

    def __getitem__(self, name: str) -> Any:
        try:
            return getattr(self, name)
        except AttributeError:
            raise KeyError(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self._config

    def __iter__(self) -> Iterator[str]:
        yield from self._config

    def __repr__(self):
        lines = ["Config({"]
        for name, val in self.schema.items():
            lines.append(f"  {name!r}: {val!r},")
        lines.append("})")
        return '\n'.join(lines)


READER_OPTIONS: dict[str, Option] = {
    "name": Option(str, default="<string>"),
    "first_line": Option(int, default=0),
    "max_mark_depth": Option(int, default=1, check=lambda depth: depth >= 1),
}


def reader_config(options: Iterable[str] = ()) -> Config:
    """Create a validated reader config from `name=value` strings."""
    cfg = Config(READER_OPTIONS)
    cfg.parse(options)
    cfg.validate()
    return cfg
