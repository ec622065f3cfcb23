## polykit polygon class
## =====================

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
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

"""object-oriented polygon wrapper for **polykit**

===============
Overview
===============

The ``Polygon`` class wraps a list of points read as a closed ring and
exposes the functions of ``polykit.orientation``,
``polykit.inside`` and ``polykit.normalize`` as methods.

The polygon does not copy its vertex list.  ``ensure_ccw()``,
``remove_duplicate_points()`` and ``normalize()`` change that list in
place, and anyone else holding it sees the change.

The bounding box is computed the first time it is needed and then
kept.  None of the in-place operations move it by more than epsilon,
but if you change vertices yourself after the box has been computed
you must make a new ``Polygon``.  Point classification checks the
bounding box first and skips the edge walk for points outside it.

"""

import logging
from math import floor

from polykit.geom import epsilon, isinsidebboxXY, lerp, pclose, polybbox, vstr
from polykit.inside import (
    PointInPoly,
    WindingRule,
    point_in_edge,
    point_in_poly_even_odd,
    point_in_poly_non_zero,
)
from polykit.normalize import normalize
from polykit.orientation import (
    Orientation,
    is_convex,
    polygon_orientation,
    signed_area,
)

logger = logging.getLogger(__name__)


class Polygon:
    """closed polygon over a shared, caller-owned list of points"""

    def __init__(self,vertices=None):
        if vertices is None:
            vertices = []
        elif not isinstance(vertices,list):
            raise ValueError('bad argument to Polygon constructor: {}'.format(vertices))
        self.__vertices=vertices
        self.__bbox=None

    def __repr__(self):
        return 'Polygon({})'.format(vstr(self.__vertices))

    def __len__(self):
        return len(self.__vertices)

    def __getitem__(self,i):
        return self.__vertices[i]

    @property
    def vertices(self):
        """the vertex list itself, not a copy"""
        return self.__vertices

    @property
    def bbox(self):
        """return the XY bounding box, or ``False`` for an empty polygon"""
        if self.__bbox is None:
            self.__bbox = polybbox(self.__vertices)
        return self.__bbox

    def _inbbox(self,p,epsilon):
        bb = self.bbox
        return bb is not False and isinsidebboxXY(bb,p,epsilon)

    ## parametric evaluation, one unit of t per edge.  t wraps modulo
    ## the number of vertices.
    def evaluate(self,t):
        """return the point at parameter ``t``, where vertex ``i`` is at
        ``t == i`` and edges are interpolated linearly"""
        n = len(self.__vertices)
        if n == 0:
            raise ValueError('no geometry to evaluate, empty polygon')
        t = t % n
        i = int(floor(t))
        if i >= n: # t rounded up to n
            i = 0
        inext = (i + 1) % n
        return lerp(self.__vertices[i],self.__vertices[inext],t - i)

    ## edge and inside testing

    def point_in_edge(self,p,epsilon=epsilon):
        """does ``p`` lie within ``epsilon`` of one of the edges?"""
        if not self._inbbox(p,epsilon):
            return False
        return point_in_edge(self.__vertices,p,True,epsilon)

    def point_in_poly(self,p,rule=WindingRule.EVEN_ODD,extended=False,
                      epsilon=epsilon):
        """classify ``p`` by winding ``rule``, returning a ``PointInPoly``"""
        if rule == WindingRule.EVEN_ODD:
            return self.point_in_poly_even_odd(p,extended,epsilon)
        elif rule == WindingRule.NON_ZERO:
            return self.point_in_poly_non_zero(p,extended,epsilon)
        raise ValueError('bad winding rule: {}'.format(rule))

    def point_in_poly_even_odd(self,p,extended=False,epsilon=epsilon):
        """crossing number test"""
        if not self._inbbox(p,epsilon):
            return PointInPoly.OUTSIDE
        return point_in_poly_even_odd(self.__vertices,p,extended,epsilon)

    def point_in_poly_non_zero(self,p,extended=False,epsilon=epsilon):
        """winding number test"""
        if not self._inbbox(p,epsilon):
            return PointInPoly.OUTSIDE
        return point_in_poly_non_zero(self.__vertices,p,extended,epsilon)

    def isinsideXY(self,p,rule=WindingRule.EVEN_ODD,epsilon=epsilon):
        """is ``p`` inside or on the boundary of the polygon?"""
        return self.point_in_poly(p,rule,True,epsilon) != PointInPoly.OUTSIDE

    ## orientation and area

    def orientation(self,robust=False,epsilon=epsilon):
        return polygon_orientation(self.__vertices,robust,epsilon)

    def is_ccw(self,robust=False,epsilon=epsilon):
        return self.orientation(robust,epsilon) == Orientation.CCW

    def signed_area(self,robust=True,epsilon=epsilon):
        return signed_area(self.__vertices,robust,epsilon)

    def is_convex(self,robust=True,epsilon=epsilon):
        return is_convex(self.__vertices,robust,epsilon)

    ## in-place operations on the shared vertex list

    def ensure_ccw(self,robust=False,epsilon=epsilon):
        """reverse the vertex list in place if it is clockwise; return
        ``True`` if it was reversed"""
        if self.orientation(robust,epsilon) == Orientation.CW:
            logger.debug('reversing clockwise polygon of %d vertices',
                         len(self.__vertices))
            self.__vertices.reverse()
            return True
        return False

    def remove_duplicate_points(self,epsilon=epsilon):
        """delete every vertex that is the same, within epsilon, as the
        vertex after it (cyclically).  Return the number removed."""
        vertices = self.__vertices
        removed = 0
        for i in range(len(vertices)-1,-1,-1):
            p = vertices[i]
            pnext = vertices[(i+1) % len(vertices)]
            if len(vertices) > 1 and pclose(p,pnext,epsilon):
                del vertices[i]
                removed += 1
        if removed:
            logger.debug('removed %d duplicate vertices, %d left',
                         removed,len(vertices))
        return removed

    def normalize(self,epsilon=epsilon):
        """rotate the vertex list in place to start at its
        lexicographically smallest vertex"""
        normalize(self.__vertices,epsilon)


__all__ = [
    'Polygon',
]
