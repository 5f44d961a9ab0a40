# OutlineStroke - Stroke-to-Outline Path Conversion
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Strokepath algorithm: converts a stroked path into a filled outline.

Produces line / quadratic / cubic geometry (no tessellation).

Components:
1. Path: immutable segment sequence with join-patching
2. Line joins (miter/round/bevel, inside crossings)
3. Line caps (butt/round/square)
4. Outline assembly
"""

from __future__ import annotations

import logging
import math
from dataclasses import astuple
from typing import Iterable

from ..core.curve_math import DEFAULT_CURVE_OPS, CurveOps
from ..core.error import NoCurrentPointError, PathSyntaxError, RangeCheckError
from ..core.types.commands import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    split_subpaths,
)
from ..core.types.constants import (
    LINE_CAP_BUTT,
    LINE_CAP_ROUND,
    LINE_CAP_SQUARE,
    LINE_JOIN_BEVEL,
    LINE_JOIN_MITER,
    LINE_JOIN_ROUND,
    POINT_EPSILON,
)
from ..core.types.point import Point
from ..core.types.segment import (
    CubicCurve,
    Line,
    QuadraticCurve,
    Segment,
    SegmentIntersection,
)

logger = logging.getLogger(__name__)

# Crossings this close to the far end of either segment are where the pair
# already touches, not a join.
_END_T = 1e-3


# ---------------------------------------------------------------------------
# Arc helpers
# ---------------------------------------------------------------------------

def get_control_point(start: Point, end: Point) -> Point:
    """
    Apex of the semicircle over the chord start-end: the point on the
    circle with diameter start-end, 90° counter-clockwise from the chord
    direction as seen from the centre.
    """
    r = end.distance(start) / 2
    center = start.center(end)
    delta = center - start
    return center + delta.set_r(r).set_theta(delta.theta + 90)


def get_half_point(first: Point, last: Point, center: Point) -> Point:
    """
    Point on the arc around center that bisects the angle first-center-last.
    The sweep is normalised to (-180°, 180°], so the shorter arc is taken.
    """
    d1 = first - center
    d2 = last - center
    sweep = d2.theta - d1.theta
    while sweep > 180:
        sweep -= 360
    while sweep <= -180:
        sweep += 360
    return center + d1.set_theta(d1.theta + sweep / 2)


def get_quadratic_bezier(first: Point, mid: Point, last: Point,
                         ops: CurveOps | None = None) -> QuadraticCurve:
    """Quadratic from first to last passing through mid at t=0.5."""
    ops = ops or DEFAULT_CURVE_OPS
    return QuadraticCurve(*ops.quadratic_from_points(first, mid, last, 0.5), ops=ops)


def arc_through(start: Point, apex: Point, end: Point, center: Point,
                ops: CurveOps | None = None) -> list[QuadraticCurve]:
    """Two quadratic pieces approximating the arc start -> apex -> end."""
    first_half = get_half_point(start, apex, center)
    last_half = get_half_point(apex, end, center)
    return [
        get_quadratic_bezier(start, first_half, apex, ops),
        get_quadratic_bezier(apex, last_half, end, ops),
    ]


def round_join(start: Point, end: Point, corner: Point,
               ops: CurveOps | None = None) -> list[Segment]:
    """
    Circular arc from start to end on the outside of a join.

    corner is where the two offset tangents meet.  The arc centre is the
    intersection of the perpendiculars to start-corner at start and to
    end-corner at end, which for offset curves is the source vertex.
    """
    ops = ops or DEFAULT_CURVE_OPS
    d_start = corner - start
    d_end = corner - end
    center = ops.line_intersection(
        start, start + d_start.set_theta(d_start.theta + 90),
        end, end + d_end.set_theta(d_end.theta + 90))
    if center is None:
        return [Line(start, end, ops=ops)]
    apex = get_half_point(start, end, center)
    return arc_through(start, apex, end, center, ops)


def make_circle(center: Point, radius: float, ops: CurveOps | None = None) -> Path:
    """A closed circle of four quadratic quarter arcs, starting at angle 0."""
    ops = ops or DEFAULT_CURVE_OPS
    east = center + Point(radius, 0.0)
    south = center + Point(0.0, radius)
    west = center + Point(-radius, 0.0)
    north = center + Point(0.0, -radius)
    segs = (arc_through(east, south, west, center, ops)
            + arc_through(west, north, east, center, ops))
    return Path(segs, True, LINE_JOIN_ROUND, ops)


# ---------------------------------------------------------------------------
# Joins
# ---------------------------------------------------------------------------

def _inside_crossing(prev: Segment, cur: Segment) -> SegmentIntersection | None:
    """Crossing of prev and cur nearest the joint, ignoring where they already touch."""
    best = None
    for hit in prev.intersections(cur):
        if hit.t_self <= _END_T and hit.point.eql(prev.first_point()):
            continue
        if hit.t_other >= 1 - _END_T and hit.point.eql(cur.last_point()):
            continue
        if best is None or hit.t_self > best.t_self:
            best = hit
    return best


def _valid_corner(prev: Segment, cur: Segment, corner: Point | None) -> Point | None:
    """
    The tangent-extension point, or None when it lies behind the joint.
    Offsets of segments too short for their offsets to cross produce
    such points; joining through them would fold the outline back.
    """
    if corner is None:
        return None
    ahead = (corner - prev.last_point()).dot(prev.end_tangent())
    behind = (corner - cur.first_point()).dot(cur.start_tangent())
    if ahead < -POINT_EPSILON or behind > POINT_EPSILON:
        return None
    return corner


def _bridge(prev: Segment, cur: Segment, linejoin: int, ops: CurveOps) -> list[Segment]:
    """Connect prev to cur when the tangent extension is unusable."""
    start = prev.last_point()
    end = cur.first_point()
    t_prev = prev.end_tangent()
    t_cur = cur.start_tangent()
    if linejoin == LINE_JOIN_ROUND and t_prev.dot(t_cur) < 0 and abs(
            t_prev.normalized().cross(t_cur.normalized())) < 1e-6:
        # U-turn: half circle bulging in prev's direction of travel
        center = start.center(end)
        apex = center + t_prev.normalized() * (start.distance(end) / 2)
        logger.debug("round U-turn join at %s", center)
        return arc_through(start, apex, end, center, ops)
    # parallel tangents: bridge with a line instead of leaving the contour open
    return [Line(start, end, ops=ops)]


def _patch_pair(prev: Segment, cur: Segment, linejoin: int, ops: CurveOps,
                allow_crossing: bool = True) -> tuple[bool, list[Segment]]:
    """
    Repair the gap between prev and cur.

    Returns (overwrite_prev, segments).  When overwrite_prev is True the
    segments replace both prev and cur; otherwise they follow prev and end
    with cur.
    """
    if prev.last_point().eql(cur.first_point()):
        return False, [cur]

    crossing = _inside_crossing(prev, cur) if allow_crossing else None
    if crossing is not None:
        # Inside join: the offsets overlap, cut both back to the crossing
        head = prev.split(0.0, crossing.t_self).with_last_point(crossing.point)
        tail = cur.split(crossing.t_other, 1.0).with_first_point(crossing.point)
        logger.debug("inside join at %s", crossing.point)
        return True, [s for s in (head,) if not s.is_degenerate()] + [tail]

    start = prev.last_point()
    end = cur.first_point()
    corner = _valid_corner(prev, cur, prev.extend_intersects(cur))
    if corner is None:
        return False, _bridge(prev, cur, linejoin, ops) + [cur]

    if linejoin == LINE_JOIN_ROUND:
        join = round_join(start, end, corner, ops)
    elif linejoin == LINE_JOIN_BEVEL:
        join = [Line(start, end, ops=ops)]
    else:
        join = [Line(start, corner, ops=ops), Line(corner, end, ops=ops)]
    return False, [s for s in join if not s.is_degenerate()] + [cur]


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------

class Path:
    """
    Ordered, immutable sequence of segments.

    Every structural change (append, connect, close, reverse, offset)
    returns a new Path.  Consecutive segments are made to share endpoints by
    connect_patch_when_need, not assumed to on construction.
    """

    def __init__(self, segs: Iterable[Segment] | None = None, closed: bool = False,
                 linejoin: int = LINE_JOIN_MITER, ops: CurveOps | None = None) -> None:
        self.segs = tuple(segs or ())
        self.closed = closed
        self.linejoin = linejoin
        self.ops = ops or DEFAULT_CURVE_OPS

    @staticmethod
    def connect_patch_when_need(segs: Iterable[Segment], is_closed: bool,
                                linejoin: int = LINE_JOIN_MITER,
                                ops: CurveOps | None = None) -> list[Segment]:
        """
        Return segs with every gap between neighbours repaired: crossing
        offsets are trimmed to their crossing point, other gaps get join
        geometry for linejoin.  With is_closed the last/first pair is
        repaired too.
        """
        ops = ops or DEFAULT_CURVE_OPS
        result: list[Segment] = []
        for seg in segs:
            if seg.is_degenerate():
                continue
            if not result:
                result.append(seg)
                continue
            overwrite, patched = _patch_pair(result[-1], seg, linejoin, ops)
            if overwrite:
                result.pop()
            result.extend(patched)

        if is_closed and result and not result[-1].last_point().eql(result[0].first_point()):
            if len(result) == 1:
                _, patched = _patch_pair(result[0], result[0], linejoin, ops,
                                         allow_crossing=False)
                return result + patched[:-1]
            overwrite, patched = _patch_pair(result[-1], result[0], linejoin, ops)
            if overwrite:
                return [patched[-1]] + result[1:-1] + patched[:-1]
            return result + patched[:-1]

        return result

    @staticmethod
    def get_linecap_path(start: Point, end: Point, linecap: int,
                         ops: CurveOps | None = None) -> Path:
        """
        Cap geometry from start to end (the two offset ends at one end of
        an open path).  Square and round caps bulge 90° counter-clockwise
        from the start->end direction, which is outward for the forward /
        backward offset ends the outline passes in.
        """
        ops = ops or DEFAULT_CURVE_OPS
        if start.eql(end):
            return Path([], ops=ops)

        if linecap == LINE_CAP_ROUND:
            apex = get_control_point(start, end)
            return Path(arc_through(start, apex, end, start.center(end), ops), ops=ops)

        if linecap == LINE_CAP_SQUARE:
            r = end.distance(start) / 2
            extended = Line(start, end, ops=ops).offset(r).first_seg()
            return Path([
                Line(start, extended.first_point(), ops=ops),
                extended,
                Line(extended.last_point(), end, ops=ops),
            ], ops=ops)

        return Path([Line(start, end, ops=ops)], ops=ops)

    @staticmethod
    def from_commands(commands: list[PathCommand], linejoin: int = LINE_JOIN_MITER,
                      ops: CurveOps | None = None) -> Path:
        """
        Build one subpath from absolute commands starting with MoveTo.

        Zero-length segments are dropped; closepath inserts a closing line
        when the current point is away from the start and closes the path.
        """
        ops = ops or DEFAULT_CURVE_OPS
        if not commands or not isinstance(commands[0], MoveTo):
            raise NoCurrentPointError("drawing command before moveto", "strokepath")
        for cmd in commands:
            if not all(math.isfinite(v) for v in astuple(cmd)):
                raise RangeCheckError(f"coordinate out of range in {cmd}", "strokepath")

        start = Point(commands[0].x, commands[0].y)
        current = start
        path = Path([], False, linejoin, ops)

        for cmd in commands[1:]:
            if isinstance(cmd, ClosePath):
                if not current.eql(start):
                    path = path.append(Line(current, start, ops=ops))
                current = start
                path = path.set_closed()
                continue
            if isinstance(cmd, MoveTo):
                raise PathSyntaxError("moveto inside a subpath", func_name="strokepath")
            if path.closed:
                raise PathSyntaxError("drawing command after closepath", func_name="strokepath")

            end = Point(cmd.x, cmd.y)
            if isinstance(cmd, LineTo):
                seg = Line(current, end, ops=ops)
            elif isinstance(cmd, QuadTo):
                seg = QuadraticCurve(current, Point(cmd.x1, cmd.y1), end, ops=ops)
            elif isinstance(cmd, CurveTo):
                seg = CubicCurve(current, Point(cmd.x1, cmd.y1), Point(cmd.x2, cmd.y2),
                                 end, ops=ops)
            else:
                raise PathSyntaxError(f"unsupported command {cmd!r}", func_name="strokepath")
            current = end

            if seg.is_degenerate():
                continue
            if not isinstance(seg, Line) and seg.first_point().eql(seg.last_point()):
                # A curve that loops back onto its start has no usable chord;
                # stroke its two halves instead.
                path = path.append(seg.split(0.0, 0.5)).append(seg.split(0.5, 1.0))
                continue
            path = path.append(seg)

        return path

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def append(self, seg: Segment) -> Path:
        return Path(
            Path.connect_patch_when_need(self.segs + (seg,), False, self.linejoin, self.ops),
            self.closed, self.linejoin, self.ops)

    def connect(self, path: Path, is_closed: bool) -> Path:
        return Path(
            Path.connect_patch_when_need(self.segs + path.segs, is_closed,
                                         self.linejoin, self.ops),
            is_closed, self.linejoin, self.ops)

    def set_closed(self) -> Path:
        return Path(
            Path.connect_patch_when_need(self.segs, True, self.linejoin, self.ops),
            True, self.linejoin, self.ops)

    def reverse_points(self) -> Path:
        return Path([seg.reverse_points() for seg in reversed(self.segs)],
                    self.closed, self.linejoin, self.ops)

    def first_seg(self) -> Segment:
        return self.segs[0]

    def last_seg(self) -> Segment:
        return self.segs[-1]

    def first_point(self) -> Point:
        return self.first_seg().first_point()

    def last_point(self) -> Point:
        return self.last_seg().last_point()

    def is_continuous(self) -> bool:
        """True when every neighbouring pair (and the closing pair if closed) touches."""
        pairs = list(zip(self.segs, self.segs[1:]))
        if self.closed and self.segs:
            pairs.append((self.segs[-1], self.segs[0]))
        return all(a.last_point().eql(b.first_point()) for a, b in pairs)

    # ------------------------------------------------------------------
    # Offsetting and outlining
    # ------------------------------------------------------------------

    def offset(self, radius: float) -> Path:
        """Offset every segment by radius and stitch the pieces together."""
        result = Path([], False, self.linejoin, self.ops)
        for seg in self.segs:
            result = result.connect(seg.offset(radius), False)
        return result

    def outline(self, radius: float, linecap: int = LINE_CAP_BUTT) -> list[Path]:
        """
        Closed fill region(s) covering the stroke of this path.

        Closed paths give two contours (outer and inner boundary of the
        ring); open paths give one: forward offset, end cap, reversed
        backward offset, start cap.
        """
        if not self.segs:
            raise NoCurrentPointError("nothing to stroke", "strokepath")

        forward = self.offset(radius)
        backward = self.offset(-radius).reverse_points()

        if self.closed:
            logger.debug("closed outline: %d + %d segments",
                         len(forward.segs), len(backward.segs))
            return [forward.set_closed(), backward.set_closed()]

        end_cap = Path.get_linecap_path(
            forward.last_point(), backward.first_point(), linecap, self.ops)
        start_cap = Path.get_linecap_path(
            backward.last_point(), forward.first_point(), linecap, self.ops)

        outline = (forward
                   .connect(end_cap, False)
                   .connect(backward, False)
                   .connect(start_cap, False)
                   .set_closed())
        logger.debug("open outline: %d segments", len(outline.segs))
        return [outline]

    def to_commands(self) -> list[PathCommand]:
        """moveto, one draw command per segment, closepath if closed."""
        if not self.segs:
            return []
        first = self.first_point()
        commands: list[PathCommand] = [MoveTo(first.x, first.y)]
        commands.extend(seg.to_command() for seg in self.segs)
        if self.closed:
            commands.append(ClosePath())
        return commands

    def __len__(self) -> int:
        return len(self.segs)

    def __repr__(self) -> str:
        flag = " closed" if self.closed else ""
        return f"<Path{flag} {len(self.segs)} segs>"


# ---------------------------------------------------------------------------
# Outline assembly
# ---------------------------------------------------------------------------

def outline_commands(commands: list[PathCommand], radius: float,
                     linecap: int = LINE_CAP_BUTT, linejoin: int = LINE_JOIN_MITER,
                     ops: CurveOps | None = None) -> list[Path]:
    """
    Outline every subpath of a command list.

    A subpath whose segments all have zero length strokes to a dot with a
    round cap and to nothing otherwise.
    """
    if not any(not isinstance(cmd, (MoveTo, ClosePath)) for cmd in commands):
        raise NoCurrentPointError("no drawing commands to stroke", "strokepath")

    outlines: list[Path] = []
    for sub in split_subpaths(commands):
        path = Path.from_commands(sub, linejoin, ops)
        if path.segs:
            outlines.extend(path.outline(radius, linecap))
        elif linecap == LINE_CAP_ROUND and any(
                isinstance(cmd, (LineTo, QuadTo, CurveTo)) for cmd in sub):
            start = sub[0]
            outlines.append(make_circle(Point(start.x, start.y), radius, ops))
        else:
            logger.debug("skipping zero-length subpath at (%s, %s)", sub[0].x, sub[0].y)
    return outlines
