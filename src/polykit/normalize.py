## canonical vertex order for polykit polygons
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

"""Rotate a polygon's point list into a canonical starting vertex."""

from __future__ import annotations

import logging
from typing import MutableSequence, Sequence

from polykit.geom import epsilon, lexcompareXY

logger = logging.getLogger(__name__)


def find_left_most(points: Sequence, epsilon: float = epsilon) -> int:
    """Index of the lexicographically smallest point (minimum x, then
    minimum y).

    Ties keep the earliest index, except when that index is 0: then
    copies of the minimum at the end of the list win, and the latest
    point of the run that wraps around from the end is chosen.  Either
    way the result is the start of the run of minimal points.
    """
    if len(points) == 0:
        raise ValueError('empty point list passed to find_left_most()')

    index = 0
    mn = points[index]
    for i in range(1, len(points)):
        if lexcompareXY(mn, points[i], epsilon) > 0:
            index = i
            mn = points[index]

    ## special case: the minimum is point 0.  Walk back from the end
    ## over equal points.
    if index == 0:
        for i in range(len(points) - 1, 0, -1):
            if lexcompareXY(mn, points[i], epsilon) == 0:
                index = i
                mn = points[index]
            else:
                break

    return index


def shift_left(points: MutableSequence, count: int) -> None:
    """Rotate ``points`` in place so that ``points[count]`` comes first."""
    n = len(points)
    if n == 0:
        return
    count %= n
    if count:
        points[:] = list(points[count:]) + list(points[:count])


def normalize(points: MutableSequence, epsilon: float = epsilon) -> None:
    """Rotate ``points`` in place to start at ``find_left_most()``.

    Any cyclic permutation of the same ring normalizes to the same
    list.
    """
    if len(points) == 0:
        return
    index = find_left_most(points, epsilon)
    if index:
        logger.debug('rotating %d points left by %d', len(points), index)
        shift_left(points, index)


__all__ = [
    'find_left_most',
    'shift_left',
    'normalize',
]
