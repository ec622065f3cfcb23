## circular vertex enumerators for polykit
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
Circular Enumerators
====================

A polygon is a list of points read as a closed ring: the edge from the
last point back to the first is implicit.  The enumerators in this
module walk such a ring one vertex at a time, in either direction,
wrapping around at the ends.

``CircularEnumerator`` is plain index arithmetic.

``RobustCircularEnumerator`` treats every run of consecutive points
that are the same within epsilon as a single *logical vertex*.
``next()`` moves to the first point of the following run, and
``prev()`` moves to the *first* point of the preceding run, so that
alternating calls always land on the same index for a given logical
vertex.  When the whole ring is one run there is nowhere to go:
``next()`` and ``prev()`` return ``False`` and leave the index alone.

Both share the ``PolyEnumerator`` interface, so orientation, area and
convexity code is written once and handed either walker.  Enumerators
hold a reference to the point list, never a copy, and are not meant to
be shared between threads; use ``clone()`` to start an independent
walk from the same position.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from polykit.geom import epsilon, pclose


class PolyEnumerator(ABC):
    """Position on a closed ring of points"""

    @abstractmethod
    def next(self) -> bool:
        """Advance to the next vertex; ``False`` if there is none."""

    @abstractmethod
    def prev(self) -> bool:
        """Step back to the previous vertex; ``False`` if there is none."""

    @property
    @abstractmethod
    def index(self) -> int:
        pass

    @property
    @abstractmethod
    def point(self):
        pass

    @abstractmethod
    def clone(self) -> "PolyEnumerator":
        pass

    def equals(self, other: "PolyEnumerator") -> bool:
        """Same position?  Only indices are compared, not the rings."""
        return self.index == other.index

    def __repr__(self):
        return f"{type(self).__name__}(index={self.index})"


class CircularEnumerator(PolyEnumerator):
    """Modular walk over a ring of points, no duplicate handling"""

    def __init__(self, points: Sequence, index: int = 0):
        self._points = points
        self._index = index

    def next(self) -> bool:
        self._index += 1
        if self._index >= len(self._points):
            self._index = 0
        return True

    def prev(self) -> bool:
        self._index -= 1
        if self._index < 0:
            self._index = len(self._points) - 1
        return True

    @property
    def index(self) -> int:
        return self._index

    @property
    def point(self):
        return self._points[self._index]

    def clone(self) -> "CircularEnumerator":
        return CircularEnumerator(self._points, self._index)


class RobustCircularEnumerator(PolyEnumerator):
    """Walk over a ring of points that skips runs of duplicates

    ``find_first_equal`` moves the starting index back to the earliest
    member of the duplicate run that contains it.  Callers that already
    know they sit at the start of a run can leave it off.
    """

    def __init__(self, points: Sequence, index: int = 0,
                 find_first_equal: bool = False, epsilon: float = epsilon):
        self._points = points
        self._index = index
        self._epsilon = epsilon

        if find_first_equal:
            self._find_first_equal()

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def next(self) -> bool:
        curr = self._points[self._index]
        n = len(self._points)
        start = self._index
        count = 0
        while True:
            count += 1
            self._index += 1
            if self._index >= n:
                self._index = 0
            if count >= n or not pclose(self._points[self._index], curr,
                                        self._epsilon):
                break
        if count >= n:
            # a full lap: the ring is a single logical vertex
            self._index = start
            return False
        return True

    def prev(self) -> bool:
        curr = self._points[self._index]
        n = len(self._points)
        start = self._index
        count = 0
        while True:
            count += 1
            self._index -= 1
            if self._index < 0:
                self._index = n - 1
            if count >= n or not pclose(self._points[self._index], curr,
                                        self._epsilon):
                break
        if count >= n:
            self._index = start
            return False
        return self._find_first_equal()

    @property
    def index(self) -> int:
        return self._index

    @property
    def point(self):
        return self._points[self._index]

    def clone(self) -> "RobustCircularEnumerator":
        return RobustCircularEnumerator(self._points, self._index,
                                        epsilon=self._epsilon)

    ## walk backwards while the previous point is the same as the
    ## current one, leaving the index on the earliest member of the
    ## run.  Returns False if the whole ring is one run.
    def _find_first_equal(self) -> bool:
        curr = self._points[self._index]
        n = len(self._points)
        count = 0
        prev_index = self._index
        while True:
            self._index = prev_index
            count += 1
            prev_index -= 1
            if prev_index < 0:
                prev_index = n - 1
            if count >= n or not pclose(self._points[prev_index], curr,
                                        self._epsilon):
                break
        return count < n


def ring_distance(start: int, end: int, n: int) -> int:
    """Number of forward steps from index ``start`` to index ``end`` on
    a ring of ``n`` points.

    Epsilon equality is not transitive, so a robust ``next()`` can skip
    over the index a walk started from.  Walks add up the distance of
    every step and stop after a full lap instead of waiting to see the
    starting index again.
    """
    return (end - start) % n


def new_enumerator(points: Sequence, index: int = 0, robust: bool = True,
                   epsilon: float = epsilon) -> PolyEnumerator:
    """Return a run-aligned robust enumerator, or a plain one."""
    if robust:
        return RobustCircularEnumerator(points, index, True, epsilon)
    return CircularEnumerator(points, index)


__all__ = [
    'PolyEnumerator',
    'CircularEnumerator',
    'RobustCircularEnumerator',
    'ring_distance',
    'new_enumerator',
]
