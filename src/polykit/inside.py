## point in polygon classification for polykit
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
Point In Polygon
================

Two classic tests decide whether a point lies inside a closed polygon,
see http://geomalgorithms.com/a03-_inclusion.html

- ``point_in_poly_even_odd()`` -- the crossing number.  A ray from the
  point towards +x is crossed an odd number of times by the edges of
  the polygon iff the point is inside.

- ``point_in_poly_non_zero()`` -- the winding number.  Upward edges
  with the point on their left count +1, downward edges with the point
  on their right count -1, and the point is inside iff the total is
  not zero.

The two agree for simple polygons.  For self-intersecting polygons
they differ: the center of a pentagram is outside by the even-odd rule
and inside by the non-zero rule.

Boundary points
---------------

With ``extended=False`` no boundary test is made.  Each edge includes
its lower end and excludes its upper end, so that points on a left or
bottom boundary come out ``INSIDE`` and points on a right or top
boundary come out ``OUTSIDE``; two polygons sharing an edge never both
claim a point on it.

With ``extended=True`` a point on the boundary is reported as
``PointInPoly.ON``.

Duplicated vertices need no special handling: the zero-length edge
between two copies is horizontal within epsilon and cannot produce a
crossing.

"""

from __future__ import annotations

import enum
from typing import Sequence

from polykit.geom import LineSide, close, epsilon, segmentPointDist2XY, whichsideXY


class PointInPoly(enum.Enum):
    """Result of classifying a point against a polygon"""
    INSIDE = 'inside'
    OUTSIDE = 'outside'
    ON = 'on'


class WindingRule(enum.Enum):
    """Rule deciding which regions of a polygon are inside"""
    EVEN_ODD = 'evenodd'
    NON_ZERO = 'nonzero'


## is point p on the horizontal edge a,b?  Only called when a and b
## have the same y within epsilon.
def _onhorizontal(a, b, p, epsilon):
    if not close(p[1], a[1], epsilon):
        return False
    if a[0] < b[0]:
        mn, mx = a[0], b[0]
    else:
        mn, mx = b[0], a[0]
    return mn - epsilon <= p[0] <= mx + epsilon


def point_in_poly_even_odd(points: Sequence, p, extended: bool = False,
                           epsilon: float = epsilon) -> PointInPoly:
    """Classify ``p`` against polygon ``points`` by the even-odd rule."""
    n = len(points)
    cn = 0 # crossing number

    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]

        if extended and close(a[1], b[1], epsilon):
            if _onhorizontal(a, b, p, epsilon):
                return PointInPoly.ON
            continue

        if (p[1] < b[1] - epsilon) if p[1] >= a[1] - epsilon \
           else (p[1] >= b[1] - epsilon):
            # upward or downward crossing: compute the x coordinate
            # where the edge meets the ray
            vt = (p[1] - a[1]) / (b[1] - a[1])
            x = a[0] + vt * (b[0] - a[0])

            if close(p[0], x, epsilon):
                if extended:
                    return PointInPoly.ON
            elif p[0] < x - epsilon:
                cn += 1

    if cn % 2 == 1:
        return PointInPoly.INSIDE
    return PointInPoly.OUTSIDE


def point_in_poly_non_zero(points: Sequence, p, extended: bool = False,
                           epsilon: float = epsilon) -> PointInPoly:
    """Classify ``p`` against polygon ``points`` by the non-zero rule."""
    n = len(points)
    wn = 0 # winding number

    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]

        if extended and close(a[1], b[1], epsilon):
            if _onhorizontal(a, b, p, epsilon):
                return PointInPoly.ON
            continue

        if p[1] >= a[1] - epsilon:
            if p[1] < b[1] - epsilon: # upward crossing
                side = whichsideXY(a, b, p, epsilon)
                if side == LineSide.LEFT:
                    wn += 1
                elif side == LineSide.MIDDLE and extended:
                    return PointInPoly.ON
        else:
            if p[1] >= b[1] - epsilon: # downward crossing
                side = whichsideXY(a, b, p, epsilon)
                if side == LineSide.RIGHT:
                    wn -= 1
                elif side == LineSide.MIDDLE and extended:
                    return PointInPoly.ON

    if wn != 0:
        return PointInPoly.INSIDE
    return PointInPoly.OUTSIDE


def point_in_poly(points: Sequence, p, rule: WindingRule,
                  extended: bool = False,
                  epsilon: float = epsilon) -> PointInPoly:
    """Classify ``p`` against polygon ``points`` by winding ``rule``."""
    if rule == WindingRule.EVEN_ODD:
        return point_in_poly_even_odd(points, p, extended, epsilon)
    elif rule == WindingRule.NON_ZERO:
        return point_in_poly_non_zero(points, p, extended, epsilon)
    raise ValueError('bad winding rule: {}'.format(rule))


def point_in_edge(points: Sequence, p, closed: bool = True,
                  epsilon: float = epsilon) -> bool:
    """Does ``p`` lie within ``epsilon`` of an edge of ``points``?

    With ``closed=False`` the points are a polyline and the edge from
    the last point back to the first is not tested.
    """
    n = len(points)
    if n == 0:
        return False
    epsilon2 = epsilon * epsilon

    if closed:
        a = points[-1]
        start = 0
    else:
        a = points[0]
        start = 1
    if n == 1:
        return segmentPointDist2XY(a, a, p) <= epsilon2

    for i in range(start, n):
        b = points[i]
        if segmentPointDist2XY(a, b, p) <= epsilon2:
            return True
        a = b
    return False


__all__ = [
    'PointInPoly',
    'WindingRule',
    'point_in_poly_even_odd',
    'point_in_poly_non_zero',
    'point_in_poly',
    'point_in_edge',
]
