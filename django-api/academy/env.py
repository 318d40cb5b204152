"""Typed readers over environment variables."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from django.core.exceptions import ImproperlyConfigured

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


class Env:
    """Read settings from a mapping, ``os.environ`` by default.

    ``env("NAME", default)`` returns the raw string; ``bool``, ``int`` and
    ``list`` parse it. A variable that is unset yields the default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def __call__(self, name: str, default: str | None = None) -> str | None:
        value = self._environ.get(name)
        return default if value is None else value

    def bool(self, name: str, default: bool = False) -> bool:
        value = self._environ.get(name)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
        raise ImproperlyConfigured(f"{name} must be a boolean, got {value!r}")

    def int(self, name: str, default: int | None = None) -> int | None:
        value = self._environ.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise ImproperlyConfigured(f"{name} must be an integer, got {value!r}") from exc

    def list(self, name: str, default: Iterable[str] = ()) -> list[str]:
        """Split a comma separated variable, dropping blank entries."""
        value = self._environ.get(name)
        if value is None:
            return [*default]
        return [item.strip() for item in value.split(",") if item.strip()]
