"""Reading and writing of the game's configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

StrPath = Union[str, PathLike]

_WORD = re.compile(r"[A-Za-z]+")
_NUMBER = re.compile(r"[0-9]+")


class ParseError(ValueError):
    """The configuration file does not match the expected layout."""


def _clamp(value: int, low: int, high: int) -> int:
    return min(high, max(low, value))


def _first_word(line: str) -> str:
    match = _WORD.search(line)
    if match is None:
        raise ParseError(f"no parameter name in line {line!r}")
    return match.group()


def _first_number(line: str) -> int:
    match = _NUMBER.search(line)
    if match is None:
        raise ParseError(f"no value in line {line!r}")
    return int(match.group())


def _read_lines(path: StrPath) -> list[str]:
    with open(path, encoding="utf-8", errors="replace", newline="") as file:
        text = file.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class GameParameter:
    """A named integer parameter kept within an inclusive range."""

    name: str
    value: int
    min_value: int
    max_value: int

    def __post_init__(self) -> None:
        self.value = _clamp(self.value, self.min_value, self.max_value)


class Parser:
    """Knows the expected parameters, their defaults and their limits."""

    def __init__(self) -> None:
        self._params: list[GameParameter] = []

    def add_default(self, name: str, value: int, min_value: int, max_value: int) -> None:
        self._params.append(GameParameter(name, value, min_value, max_value))

    def defaults(self) -> dict[str, int]:
        return {param.name: param.value for param in self._params}

    def write_file(self, path: StrPath, params: dict[str, int]) -> None:
        """Write the values followed by a list of the limits."""
        lines = [f"{param.name} {params[param.name]}" for param in self._params]
        lines.append("")
        lines.append("Ограничения:")
        lines.extend(
            f"{param.min_value} <= {param.name} <= {param.max_value}"
            for param in self._params
        )
        with open(path, "w", encoding="utf-8") as file:
            file.write("\n".join(lines) + "\n")

    def read_file(self, path: StrPath) -> dict[str, int]:
        """Read one "name value" line per parameter, in order, clamping each value."""
        lines = _read_lines(path)
        result: dict[str, int] = {}
        for param, line in zip(self._params, lines):
            name = _first_word(line)
            value = _first_number(line)
            if name != param.name:
                raise ParseError(f"expected {param.name!r}, found {name!r}")
            result[name] = _clamp(value, param.min_value, param.max_value)
        if len(result) != len(self._params):
            raise ParseError("configuration file is incomplete")
        return result


def _game_parser() -> Parser:
    parser = Parser()
    parser.add_default("width", 500, 100, 700)
    parser.add_default("height", 500, 100, 700)
    parser.add_default("rows", 40, 10, 200)
    parser.add_default("cols", 40, 10, 200)
    return parser


def load_config(path: StrPath) -> dict[str, int]:
    """Read the game configuration, fall back to defaults, and write it back."""
    parser = _game_parser()
    try:
        config = parser.read_file(path)
    except (OSError, ParseError):
        config = parser.defaults()
    try:
        parser.write_file(path, config)
    except OSError:
        print("Failed to write the configuration file.")
    return config