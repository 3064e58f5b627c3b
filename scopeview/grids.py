"""Background grids drawn behind the voltage and spectrum traces."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]
Rgb = tuple[float, float, float]

GRID_GREY: Rgb = (0.4, 0.4, 0.4)
AXIS_BLACK: Rgb = (0.0, 0.0, 0.0)

_DIVISIONS = (-0.25, -0.50, -0.75, 0.00, 0.25, 0.50, 0.75)


@dataclass(frozen=True)
class Segment:
    """A straight grid line between two points, drawn in one colour."""

    start: Point
    end: Point
    color: Rgb


def _line_color(position: float) -> Rgb:
    return AXIS_BLACK if position == 0.0 else GRID_GREY


def _vertical_lines() -> list[Segment]:
    return [
        Segment((x, 1.0), (x, -1.0), _line_color(x)) for x in _DIVISIONS
    ]


def _horizontal_lines() -> list[Segment]:
    return [
        Segment((-1.0, y), (1.0, y), _line_color(y)) for y in _DIVISIONS
    ]


class _Grid:
    """Shared flattening of segments into vertex and colour arrays."""

    def segments(self) -> list[Segment]:
        raise NotImplementedError

    @property
    def vertex(self) -> list[float]:
        """Interleaved x1, y1, x2, y2 coordinates of every line."""
        return [
            c
            for seg in self.segments()
            for c in (*seg.start, *seg.end)
        ]

    @property
    def color(self) -> list[float]:
        """Interleaved r, g, b components, one triple per line end."""
        return [c for seg in self.segments() for c in seg.color * 2]


class GridVoltage(_Grid):
    """A grid of seven vertical and seven horizontal divisions, axes in black."""

    def segments(self) -> list[Segment]:
        """The vertical lines followed by the horizontal lines."""
        return _vertical_lines() + _horizontal_lines()


class GridSpectrum(_Grid):
    """Seven vertical divisions and a black baseline along the bottom edge."""

    def segments(self) -> list[Segment]:
        """The vertical lines, all grey, followed by the baseline."""
        verticals = [
            Segment(seg.start, seg.end, GRID_GREY) for seg in _vertical_lines()
        ]
        return verticals + [Segment((-1.0, -1.0), (1.0, -1.0), AXIS_BLACK)]