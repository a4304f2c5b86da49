"""Points, lines and polygons in two or three dimensions.

Shapes combine with ``+``:

* ``Point + Point`` gives a :class:`Line`
* ``Point + Line``, ``Line + Point`` and ``Line + Line`` give a :class:`Polygon`
* anything added to a :class:`Polygon` gives a new polygon with the extra points

A polygon never holds the same point twice; repeated points are dropped.

Shapes have a text form that :meth:`Point.parse`, :meth:`Line.parse`,
:meth:`Polygon.parse` and :func:`read_shapes` read back:
``(x,y)`` or ``(x,y,z)`` for points, ``[(..),(..)]`` for lines and
``{(..),(..),...}`` for polygons.
"""

from __future__ import annotations

import operator
import re
from typing import Iterable, Iterator, Union

__all__ = ["GeometryError", "Point", "Line", "Polygon", "read_shapes"]

_AXIS_MISMATCH = "Can not combine points with different number of axis."
_SHAPE_AXIS_MISMATCH = (
    "Can not combine polygons, lines or points with different number of axis."
)
_POLYGON_AXIS_MISMATCH = "Can not combine polygons with different number of axis."


class GeometryError(ValueError):
    """Raised for shapes that break the library's rules or cannot be parsed."""


class Point:
    """An immutable point with two or three integer coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, *coords: int) -> None:
        values = tuple(operator.index(c) for c in coords)
        if not 2 <= len(values) <= 3:
            raise GeometryError("This library only allows for 2D and 3D.")
        self._coords = values

    @property
    def coords(self) -> tuple[int, ...]:
        return self._coords

    @property
    def axes(self) -> int:
        return len(self._coords)

    def is_axis_compatible(self, other: Point) -> bool:
        """Return True if ``other`` has as many axes as this point."""
        return self.axes == other.axes

    @classmethod
    def parse(cls, text: str) -> Point:
        """Read a point written as ``(x,y)`` or ``(x,y,z)``."""
        reader = _Reader(text)
        point = reader.read_point()
        reader.expect_end()
        return point

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[int]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> int:
        return self._coords[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        return f"Point{self._coords!r}"

    def __str__(self) -> str:
        return "(" + ",".join(str(c) for c in self._coords) + ")"

    def __add__(self, other: object) -> Union[Line, Polygon]:
        if isinstance(other, Point):
            return Line(self, other)
        if isinstance(other, Line):
            return _polygon_from(self, other)
        if isinstance(other, Polygon):
            return other + self
        return NotImplemented


class Line:
    """An ordered pair of points with the same number of axes."""

    __slots__ = ("_points",)

    def __init__(self, first: Point, second: Point) -> None:
        if first == second:
            raise GeometryError("Line must consist of two different points")
        self._assign(first, second)

    def _assign(self, first: Point, second: Point) -> None:
        if not first.is_axis_compatible(second):
            raise GeometryError(_AXIS_MISMATCH)
        self._points = (first, second)

    @classmethod
    def _from_text(cls, first: Point, second: Point) -> Line:
        # Lines read from text are only checked for matching axes.
        line = cls.__new__(cls)
        line._assign(first, second)
        return line

    @property
    def axes(self) -> int:
        return self._points[0].axes

    @classmethod
    def parse(cls, text: str) -> Line:
        """Read a line written as ``[(x,y),(x,y)]`` or with 3D points."""
        reader = _Reader(text)
        line = reader.read_line()
        reader.expect_end()
        return line

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Line({self._points[0]!r}, {self._points[1]!r})"

    def __str__(self) -> str:
        return f"[{self._points[0]},{self._points[1]}]"

    def __add__(self, other: object) -> Polygon:
        if isinstance(other, Point):
            return _polygon_from(other, self)
        if isinstance(other, Line):
            polygon = _polygon_from(self[0], other)
            polygon.add(self[1])
            return polygon
        if isinstance(other, Polygon):
            return other + self
        return NotImplemented


Shape = Union[Point, Line, "Polygon"]


class Polygon:
    """An ordered collection of distinct points sharing one axis count."""

    __slots__ = ("_axes", "_points")

    def __init__(self, axes: int, points: Iterable[Point] = ()) -> None:
        self._axes = operator.index(axes)
        self._points: list[Point] = []
        for point in points:
            self.add(point)

    @property
    def axes(self) -> int:
        return self._axes

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def _check_axes(self, point: Point) -> None:
        if point.axes != self._axes:
            raise GeometryError(_SHAPE_AXIS_MISMATCH)

    def _append_new(self, point: Point) -> None:
        if point not in self._points:
            self._points.append(point)

    def add(self, shape: Shape) -> Polygon:
        """Add the points of ``shape`` that are not already present; return self."""
        if isinstance(shape, Point):
            self._check_axes(shape)
            self._append_new(shape)
        elif isinstance(shape, Line):
            self._check_axes(shape[0])
            for point in shape:
                self._append_new(point)
        elif isinstance(shape, Polygon):
            if shape._axes != self._axes:
                raise GeometryError(_POLYGON_AXIS_MISMATCH)
            for point in shape._points:
                self._append_new(point)
        else:
            raise TypeError(f"cannot add {type(shape).__name__} to a polygon")
        return self

    def copy(self) -> Polygon:
        """Return an independent copy of this polygon."""
        duplicate = Polygon(self._axes)
        duplicate._points = list(self._points)
        return duplicate

    @classmethod
    def parse(cls, text: str) -> Polygon:
        """Read a polygon written as ``{(x,y),(x,y),...}``."""
        reader = _Reader(text)
        polygon = reader.read_polygon()
        reader.expect_end()
        return polygon

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polygon({self._axes}, {self._points!r})"

    def __str__(self) -> str:
        return "{" + ",".join(str(p) for p in self._points) + "}"

    def __iadd__(self, other: object) -> Polygon:
        if not isinstance(other, (Point, Line, Polygon)):
            return NotImplemented
        return self.add(other)

    def __add__(self, other: object) -> Polygon:
        if not isinstance(other, (Point, Line, Polygon)):
            return NotImplemented
        return self.copy().add(other)


def _polygon_from(point: Point, line: Line) -> Polygon:
    if point == line[0] or point == line[1]:
        raise GeometryError("Polygon can not consist of two or more similar points.")
    polygon = Polygon(point.axes)
    polygon._check_axes(line[0])
    polygon._points = [point, line[0], line[1]]
    return polygon


_INT = re.compile(r"[+-]?\d+")


class _Reader:
    """Cursor over shape text; whitespace between tokens is ignored."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def peek(self) -> str:
        self._skip_whitespace()
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def next_char(self) -> str:
        ch = self.peek()
        if not ch:
            raise GeometryError("Unexpected end of shape text.")
        self._pos += 1
        return ch

    def expect(self, expected: str) -> None:
        found = self.peek()
        if found != expected:
            raise GeometryError(
                f"Expected {expected!r} at position {self._pos}, found {found!r}."
            )
        self._pos += 1

    def expect_end(self) -> None:
        if self.peek():
            raise GeometryError(f"Unexpected text at position {self._pos}.")

    def read_int(self) -> int:
        self._skip_whitespace()
        match = _INT.match(self._text, self._pos)
        if match is None:
            raise GeometryError(f"Expected an integer at position {self._pos}.")
        self._pos = match.end()
        return int(match.group())

    def read_point(self) -> Point:
        self.expect("(")
        coords = [self.read_int()]
        while (ch := self.next_char()) != ")":
            if ch != ",":
                raise GeometryError(f"Unexpected {ch!r} inside a point.")
            coords.append(self.read_int())
        return Point(*coords)

    def read_line(self) -> Line:
        self.expect("[")
        first = self.read_point()
        self.expect(",")
        second = self.read_point()
        self.expect("]")
        return Line._from_text(first, second)

    def read_polygon(self) -> Polygon:
        self.expect("{")
        first = self.read_point()
        polygon = Polygon(first.axes)
        polygon.add(first)
        while (ch := self.next_char()) != "}":
            if ch != ",":
                raise GeometryError(f"Unexpected {ch!r} inside a polygon.")
            polygon.add(self.read_point())
        return polygon

    def read_shape(self) -> Shape:
        ch = self.peek()
        if ch == "(":
            return self.read_point()
        if ch == "[":
            return self.read_line()
        if ch == "{":
            return self.read_polygon()
        raise GeometryError(f"Unexpected {ch!r} at position {self._pos}.")


def read_shapes(text: str) -> list[Shape]:
    """Read every point, line and polygon written one after another in ``text``."""
    reader = _Reader(text)
    shapes: list[Shape] = []
    while reader.peek():
        shapes.append(reader.read_shape())
    return shapes