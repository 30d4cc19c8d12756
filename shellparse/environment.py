"""The shell's own copy of the environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


@dataclass
class EnvVar:
    """One variable: its name, value and whether it was given a value."""

    name: str
    value: str = ""
    is_exported: bool = True


class Environment(Mapping[str, str]):
    """An ordered collection of variables, readable as a name-to-value mapping."""

    def __init__(self, variables: Iterable[EnvVar] = ()) -> None:
        self.variables: list[EnvVar] = list(variables)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> Environment:
        """Build an environment in which every variable is exported."""
        return cls(EnvVar(name, value, True) for name, value in mapping.items())

    def _find(self, name: str) -> EnvVar | None:
        return next((var for var in self.variables if var.name == name), None)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the first variable called ``name``, or ``default``."""
        var = self._find(name)
        return default if var is None else var.value

    def __getitem__(self, name: str) -> str:
        var = self._find(name)
        if var is None:
            raise KeyError(name)
        return var.value

    def __contains__(self, name: object) -> bool:
        return any(var.name == name for var in self.variables)

    def __iter__(self) -> Iterator[str]:
        return (var.name for var in self.variables)

    def __len__(self) -> int:
        return len(self.variables)

    def to_envp(self) -> list[str]:
        """Return ``NAME=VALUE`` strings for every variable, in order."""
        return [f"{var.name}={var.value}" for var in self.variables]

    def format_export(self) -> str:
        """Render the variables as ``export`` lines."""
        lines = []
        for var in self.variables:
            if var.is_exported:
                lines.append(f'export {var.name}="{var.value}"\n')
            else:
                lines.append(f"export {var.name}\n")
        return "".join(lines)

    def describe(self) -> str:
        """Render every variable's fields, for debugging."""
        return "".join(
            f"name: {var.name}\nvalue: {var.value}\nis_exported: {int(var.is_exported)}\n"
            for var in self.variables
        )


def is_alpha(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII letter."""
    return all(c in _LETTERS for c in text)


def is_name_start(c: str) -> bool:
    """Return True if ``c`` may start a variable name."""
    return c == "_" or c in _LETTERS