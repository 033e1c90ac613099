"""Environment variables as an ordered name/value mapping."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator


def parse_entry(entry: str) -> tuple[str, str | None]:
    """Split ``NAME=value`` at the first ``=``; without one the value is None."""
    name, sep, value = entry.partition("=")
    return (name, value) if sep else (name, None)


def _render(name: str, value: str | None) -> str:
    return name if value is None else f"{name}={value}"


class Environment:
    """An ordered set of variables; a value may be None when no ``=`` was given."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    @classmethod
    def from_envp(cls, envp: Iterable[str] | None) -> Environment:
        """Build an environment from ``NAME=value`` strings; the first of a name wins."""
        env = cls()
        for entry in envp or ():
            name, value = parse_entry(entry)
            env._vars.setdefault(name, value)
        return env

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is unset or has no value."""
        return self._vars.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Set ``name``; a new name is added after the existing ones."""
        self._vars[name] = value

    def lines(self) -> list[str]:
        """Return the variables as ``NAME=value`` (or ``NAME``) strings, in order."""
        return [_render(name, value) for name, value in self._vars.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)


def print_env(envp: Iterable[str] | None) -> int:
    """Print each entry of ``envp`` on its own line, as the env builtin does."""
    for entry in envp or ():
        sys.stdout.write(_render(*parse_entry(entry)) + "\n")
    sys.stdout.flush()
    return 0