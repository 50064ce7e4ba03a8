"""Interactive menu for building and listing shapes."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from enum import IntEnum
from typing import Callable, TextIO

from .ellipse import Circle, Ellipse
from .rectangle import Rectangle, Square
from .shape import Shape, _format_number
from .triangle import Isosceles, Triangle

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_MENU = (
    "1. Add an Ellipse\n"
    "2. Add a Circle\n"
    "3. Add a Triangle\n"
    "4. Add an Isosceles Triangle\n"
    "5. Add a Rectangle\n"
    "6. Add a Square\n"
    "7. List all Ellipses\n"
    "8. List all Triangles\n"
    "9. List all Rectangles\n"
    "10. List all Shapes\n"
    "11. Exit\n"
)


class _Option(IntEnum):
    ADD_ELLIPSE = 1
    ADD_CIRCLE = 2
    ADD_TRIANGLE = 3
    ADD_ISOSCELES = 4
    ADD_RECTANGLE = 5
    ADD_SQUARE = 6
    LIST_ELLIPSES = 7
    LIST_TRIANGLES = 8
    LIST_RECTANGLES = 9
    LIST_ALL = 10
    EXIT = 11


class _TokenReader:
    """Reads whitespace-separated numbers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def _peek(self) -> str:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("end of input")
            self._tokens.extend(line.split())
        return self._tokens[0]

    def _take(self, pattern: re.Pattern[str], convert: Callable[[str], object]):
        token = self._peek()
        match = pattern.match(token)
        if match is None:
            raise ValueError(f"not a number: {token!r}")
        self._tokens.popleft()
        rest = token[match.end():]
        if rest:
            self._tokens.appendleft(rest)
        return convert(match.group())

    def next_int(self) -> int:
        return self._take(_INT, int)

    def next_float(self) -> float:
        return self._take(_FLOAT, float)

    def discard_line(self) -> None:
        self._tokens.clear()


def _as_reader(stdin) -> _TokenReader:
    return stdin if isinstance(stdin, _TokenReader) else _TokenReader(stdin)


def read_menu_option(stdin, stdout: TextIO, stderr: TextIO) -> int:
    """Show the menu until a valid option is entered; end of input means exit."""
    reader = _as_reader(stdin)
    while True:
        stdout.write(_MENU)
        try:
            option = reader.next_int()
        except EOFError:
            return _Option.EXIT
        except ValueError:
            reader.discard_line()
            stderr.write("Incorrect input!\n")
            continue
        if not _Option.ADD_ELLIPSE <= option <= _Option.EXIT:
            stderr.write("Incorrect menu option!\n")
            continue
        return _Option(option)


def _read_numbers(reader: _TokenReader, stdout, stderr, prompt: str, count: int) -> list[float]:
    while True:
        stdout.write(prompt)
        stdout.flush()
        try:
            return [reader.next_float() for _ in range(count)]
        except ValueError:
            reader.discard_line()
            stderr.write("Incorrect input!\n")


_Prompts = tuple[tuple[str, int], ...]

_BUILDERS: dict[_Option, tuple[Callable[..., Shape], _Prompts]] = {
    _Option.ADD_ELLIPSE: (
        Ellipse,
        (("Input major semi-axis length: ", 1), ("Input minor semi-axis length: ", 1)),
    ),
    _Option.ADD_CIRCLE: (Circle, (("Input radius length: ", 1),)),
    _Option.ADD_TRIANGLE: (Triangle, (("Input length of three sides: ", 3),)),
    _Option.ADD_ISOSCELES: (
        Isosceles,
        (("Input equal side length: ", 1), ("Input other side length: ", 1)),
    ),
    _Option.ADD_RECTANGLE: (
        Rectangle,
        (("Input base length: ", 1), ("Input height length: ", 1)),
    ),
    _Option.ADD_SQUARE: (Square, (("Input side length: ", 1),)),
}

_LISTINGS: dict[_Option, tuple[str | None, type, tuple[str, str] | None]] = {
    _Option.LIST_ELLIPSES: ("Only Ellipses", Ellipse, ("\tEccentricity: ", "eccentricity")),
    _Option.LIST_TRIANGLES: ("Only Triangles", Triangle, ("\tHypotenuse: ", "hypotenuse")),
    _Option.LIST_RECTANGLES: ("Only Rectangles", Rectangle, None),
    _Option.LIST_ALL: (None, Shape, None),
}


def _list_shapes(shapes: list[Shape], option: _Option, stdout: TextIO) -> None:
    header, kind, extra = _LISTINGS[option]
    if header is not None:
        stdout.write(f"{header}\n")
    for shape in shapes:
        if not isinstance(shape, kind):
            continue
        stdout.write(f"{shape}\n")
        stdout.write(f"\tPerimeter:    {_format_number(shape.perimeter())}\n")
        stdout.write(f"\tArea:         {_format_number(shape.area())}\n")
        if extra is not None:
            label, method = extra
            stdout.write(f"{label}{_format_number(getattr(shape, method)())}\n")
        stdout.write("\n")


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> list[Shape]:
    """Run the menu loop until exit or end of input; return the shapes entered."""
    reader = _TokenReader(stdin)
    shapes: list[Shape] = []
    try:
        while (option := read_menu_option(reader, stdout, stderr)) != _Option.EXIT:
            if option in _BUILDERS:
                factory, prompts = _BUILDERS[option]
                values = [
                    value
                    for prompt, count in prompts
                    for value in _read_numbers(reader, stdout, stderr, prompt, count)
                ]
                try:
                    shapes.append(factory(*values))
                except ValueError as exc:
                    stderr.write(f"{exc}\n")
                    continue
                stdout.write("Inserted... \n\n")
            else:
                _list_shapes(shapes, option, stdout)
    except EOFError:
        pass
    return shapes


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shape menu on the standard streams."""
    parser = argparse.ArgumentParser(
        prog="shapekit", description="Build shapes and list their measurements."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout, sys.stderr)
    return 0