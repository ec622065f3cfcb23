## orientation, area and convexity of polygons for polykit
## Copyright (c) 2024 polykit contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Orientation, Signed Area and Convexity
======================================

Polygons with positive area are in right-hand (counter-clockwise)
order.  A polygon with left-hand point order has negative area.

Every function here comes in a naive and a *robust* flavour, selected
by the ``robust`` argument.  The naive versions walk the point list by
index.  The robust versions walk it with a
``RobustCircularEnumerator`` and so never see two consecutive points
that are the same within epsilon; a polygon with duplicated vertices
gives the robust functions exactly the answer the naive functions give
for the same polygon without duplicates.

Degenerate input is not an error.  Fewer than three points, fewer than
three distinct vertices, or a polygon with no net turning is reported
as ``Orientation.DEGENERATE`` (or ``False``, or an area of 0).

"""

from __future__ import annotations

import enum
import logging
from typing import MutableSequence, Sequence

from polykit.enumerator import new_enumerator, ring_distance
from polykit.geom import LineSide, epsilon, whichsideXY
from polykit.normalize import find_left_most

logger = logging.getLogger(__name__)


class Orientation(enum.IntEnum):
    """Winding direction of a polygon"""
    CW = -1
    DEGENERATE = 0
    CCW = 1


_TURN = {
    LineSide.LEFT: 1,
    LineSide.MIDDLE: 0,
    LineSide.RIGHT: -1,
}


def polygon_orientation(points: Sequence, robust: bool = False,
                        epsilon: float = epsilon) -> Orientation:
    """Orientation of a polygon by counting its turns.

    Every triple of consecutive vertices contributes +1 for a left
    turn, -1 for a right turn and nothing when collinear.  The sign of
    the total is the orientation.
    """
    if len(points) < 3:
        return Orientation.DEGENERATE

    first = new_enumerator(points, 0, robust, epsilon)
    p1 = first.clone()
    p2 = p1.clone()
    p2.next()
    if p2.equals(first):
        return Orientation.DEGENERATE
    p3 = p2.clone()
    p3.next()
    if p3.equals(first):
        return Orientation.DEGENERATE

    n = len(points)
    count = 0
    travelled = 0
    while travelled < n:
        count += _TURN[whichsideXY(p1.point, p2.point, p3.point, epsilon)]
        start = p1.index
        p1.next()
        p2.next()
        p3.next()
        travelled += ring_distance(start, p1.index, n)

    if count > 0:
        return Orientation.CCW
    elif count < 0:
        return Orientation.CW
    return Orientation.DEGENERATE


def extreme_vertex_orientation(points: Sequence, robust: bool = False,
                               epsilon: float = epsilon) -> Orientation:
    """Orientation of a simple polygon from its lexicographically
    smallest vertex.

    The turn at the minimal vertex of a simple polygon always has the
    sign of the whole polygon, so only one triple is examined.  The
    answer is meaningless for self-intersecting polygons; use
    ``polygon_orientation()`` for those.
    """
    if len(points) < 3:
        return Orientation.DEGENERATE

    enumer = new_enumerator(points, find_left_most(points, epsilon),
                            robust, epsilon)
    nxt = enumer.clone()
    prv = enumer.clone()
    if not nxt.next() or not prv.prev():
        return Orientation.DEGENERATE

    side = whichsideXY(prv.point, enumer.point, nxt.point, epsilon)
    if side == LineSide.LEFT:
        return Orientation.CCW
    elif side == LineSide.RIGHT:
        return Orientation.CW
    return Orientation.DEGENERATE


## shoelace formula: http://paulbourke.net/geometry/polyarea/
def signed_area(points: Sequence, robust: bool = False,
                epsilon: float = epsilon) -> float:
    """Signed area of a polygon, positive when counter-clockwise."""
    if len(points) < 3:
        return 0.0

    first = new_enumerator(points, 0, robust, epsilon)
    p = first.clone()
    pnext = p.clone()
    pnext.next()
    n = len(points)
    area = 0.0
    travelled = 0
    while travelled < n:
        a = p.point
        b = pnext.point
        area += a[0]*b[1] - a[1]*b[0]
        start = p.index
        if not p.next():
            break
        pnext.next()
        travelled += ring_distance(start, p.index, n)
    return area / 2


## http://geomalgorithms.com/a01-_area.html
def signed_area2(points: Sequence) -> float:
    """Signed area of a polygon by centered differences.

    Agrees with ``signed_area()`` for any simple polygon.
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        pnext = points[(i + 1) % n]
        p = points[i]
        pprev = points[(n + i - 1) % n]
        area += p[0]*(pnext[1] - pprev[1])
    return area / 2


def is_convex(points: Sequence, robust: bool = False,
              epsilon: float = epsilon) -> bool:
    """Is the polygon convex?

    ``False`` as soon as both a left and a right turn have been seen,
    and ``False`` for a polygon with no turns at all.  Collinear
    vertices are ignored.
    """
    if len(points) < 3:
        return False

    left_turn = False
    right_turn = False

    first = new_enumerator(points, 0, robust, epsilon)
    p1 = first.clone()
    p2 = p1.clone()
    p2.next()
    if p2.equals(first):
        return False
    p3 = p2.clone()
    p3.next()
    if p3.equals(first):
        return False

    n = len(points)
    travelled = 0
    while travelled < n:
        side = whichsideXY(p1.point, p2.point, p3.point, epsilon)
        if side == LineSide.LEFT:
            left_turn = True
        elif side == LineSide.RIGHT:
            right_turn = True

        if left_turn and right_turn:
            return False

        start = p1.index
        p1.next()
        p2.next()
        p3.next()
        travelled += ring_distance(start, p1.index, n)

    return left_turn or right_turn


def ensure_ccw(points: MutableSequence, epsilon: float = epsilon) -> bool:
    """Reverse ``points`` in place if they are clockwise.

    Returns ``True`` if the list was reversed.  Any other holder of the
    same list sees the change.
    """
    return _ensure_ccw(points, False, epsilon)


def ensure_ccw_robust(points: MutableSequence,
                      epsilon: float = epsilon) -> bool:
    """As ``ensure_ccw()``, tolerating duplicated vertices."""
    return _ensure_ccw(points, True, epsilon)


def _ensure_ccw(points, robust, epsilon):
    if polygon_orientation(points, robust, epsilon) == Orientation.CW:
        logger.debug('reversing %d clockwise points', len(points))
        points.reverse()
        return True
    return False


__all__ = [
    'Orientation',
    'polygon_orientation',
    'extreme_vertex_orientation',
    'signed_area',
    'signed_area2',
    'is_convex',
    'ensure_ccw',
    'ensure_ccw_robust',
]
