## point and scalar layer for polykit
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

"""points, vectors and tolerant comparisons for **polykit**

====================
OVERVIEW
====================

The polykit.geom module is the point layer that the polygon
predicates are built on.  It provides the tolerance constant, scalar
and vector operations, the side-of-line test and bounding boxes.

constants
=========

polykit.geom provides the "constant" ``epsilon``.  It is only ever
used as the default value of an ``epsilon`` argument: every predicate
in polykit takes its tolerance explicitly, and nothing reads
``epsilon`` behind the caller's back.

points
======

Points are lists of four numbers, ``[x, y, z, w]``, made with the
``point()`` convenience function.  Unspecified ``z`` values are set to
0 and unspecified ``w`` values are set to 1.  The polygon predicates
only ever look at ``p[0]`` and ``p[1]``, so a plain ``(x, y)`` tuple
works anywhere a point is expected.  Predicates never modify the
points they are given.

Points are compared with a tolerance, never with ``==``:

- ``pclose(a, b, epsilon)`` -- are ``a`` and ``b`` the same point,
  coordinate by coordinate, to within ``epsilon``?

- ``vclose(a, b, epsilon)`` -- are ``a`` and ``b`` within euclidean
  distance ``epsilon`` of each other?

bounding boxes
==============

A bounding box is a pair of points spanning the "lower left" to
"upper right" of a figure, *e.g.* ``[point(xmin, ymin), point(xmax,
ymax)]``.  Bounding boxes are used to speed up inside testing.

"""

import enum
from math import sqrt
import copy

import mpmath as mpm

## constants
epsilon=1e-9

## working precision, in decimal digits, of value-safe orientation
## refinement
mpdps = 50

## operations on scalars
## -----------------------

## utility function to determine if argument is a "real" python
## number, since booleans are considered ints (True=1 and False=0 for
## integer arithmetic) but 1 and 0 are not considered boolean

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

## utilty function to determine if scalars a and b are the same to
## within epsilon
def close(a,b,epsilon=epsilon):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) <= epsilon


## operations on vectors
## ------------------------

## check to see if argument is a proper vector for our purposes
def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

## linear interpolation, u=0 is a, u=1 is b
def lerp(a,b,u):
    """ point at parameter ``u`` on the line from ``a`` to ``b``"""
    return point(a[0]+(b[0]-a[0])*u,
                 a[1]+(b[1]-a[1])*u)

## determine if two vectors are the same, to within epsilon
def vclose(a,b,epsilon=epsilon):
    """ are two points within euclidean distance epsilon of each other"""
    return close(mag(sub(a,b)),0,epsilon)

## the epsilon-equality used by all polygon predicates: each XY
## coordinate is compared separately
def pclose(a,b,epsilon=epsilon):
    """ are two points the same, coordinate by coordinate, within epsilon
    """
    return close(a[0],b[0],epsilon) and close(a[1],b[1],epsilon)

## lexicographic order, x first and then y, with ties within epsilon
def lexcompareXY(a,b,epsilon=epsilon):
    """ compare two points by x then y; return -1, 0 or 1"""
    if not close(a[0],b[0],epsilon):
        return -1 if a[0] < b[0] else 1
    if not close(a[1],b[1],epsilon):
        return -1 if a[1] < b[1] else 1
    return 0


## misc operations
## -----------------------------------------

# pretty printing string formatter for vectors and polygons.  You can
# use this anywhere you use str(), since it will fall back to str() if
# the argument isn't a polykit vector or list of vectors.
def vstr(a):
    """ utility function for recursively checking and formatting lists
    """
    def _isallvect(foo):
        if not isinstance(foo,list):
            return False
        if len(foo)==1:
            return isinstance(foo[0],list) and \
                (isvect(foo[0]) or _isallvect(foo[0]))
        else:
            return (isvect(foo[0]) or _isallvect(foo[0])) and \
                _isallvect(foo[1:])
    def _makestr(foo):
        if len(foo) ==1:
            return vstr(foo[0])
        else:
            return vstr(foo[0]) + ", " + _makestr(foo[1:])
    if not isinstance(a,list):
        return str(a)
    # NOTE: 3 vectors that happen to fall into the z=0 plane are
    # formatted as though they were 2 vectors.
    if isvect(a):
        if abs(a[3]-1.0) > epsilon: # not in w=1
            return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
        elif abs(a[2]) > epsilon: # not in z=0
            return "[{}, {}, {}]".format(a[0],a[1],a[2])
        else: # in x-y plane
            return "[{}, {}]".format(a[0],a[1])
    elif len(a)>0 and _isallvect(a):
        return "["+_makestr(a)+"]"
    else:
        return str(a)


## operations on points
## --------------------

def point(x=False,y=False,z=False,w=False):
    """Point creation from point or scalars"""
    if ispoint(x):
        return copy.deepcopy(x)
    if isinstance(x,tuple) and len(x) in (2,3) and \
       all(isgoodnum(c) for c in x):
        return point(*x)
    r = [0,0,0,1]
    if isgoodnum(x):
        r[0]=x
        if isgoodnum(y):
            r[1]=y
            if isgoodnum(z):
                r[2]=z
                if isgoodnum(w):
                    r[3]=w
    elif x is not False:
        raise ValueError('bad argument to point(): {}'.format(x))
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')


def ispoint(x):
    """ is it a point?"""
    if isvect(x) and x[3] > 0.0:
        return True
    return False


## side-of-line testing
## --------------------

class LineSide(enum.Enum):
    """Position of a point with respect to a directed line"""
    LEFT = 'left'
    MIDDLE = 'middle'
    RIGHT = 'right'

def _orient2d(a,b,c):
    return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])

## extended precision version of _orient2d().  The inputs are doubles,
## so at mpdps digits the products and differences are exact for any
## coordinates of reasonable magnitude.
def _mporient2d(a,b,c):
    with mpm.workdps(mpdps):
        ax = mpm.mpf(a[0])
        ay = mpm.mpf(a[1])
        dx1 = mpm.mpf(b[0]) - ax
        dy1 = mpm.mpf(b[1]) - ay
        dx2 = mpm.mpf(c[0]) - ax
        dy2 = mpm.mpf(c[1]) - ay
        return float(dx1*dy2 - dy1*dx2)

## The XY cross product of (b-a) and (c-a), which is also twice the
## signed area of the triangle a,b,c.  Positive means that a,b,c turn
## to the left.  Within a guard band around the tolerance, the double
## precision result is not trusted and the value is recomputed with
## mpmath.
def orient2dXY(a,b,c,epsilon=epsilon):
    """
    Value-safe XY cross product `(b - a) x (c - a)` for points ``a``,
    ``b``, and ``c``.  Positive for a left (counter-clockwise) turn,
    negative for a right turn.
    """
    v = _orient2d(a,b,c)
    if abs(v) <= 2*epsilon:
        v = _mporient2d(a,b,c)
    return v

def whichsideXY(a,b,p,epsilon=epsilon):
    """
    classify point ``p`` against the directed line from ``a`` to
    ``b``, returning a ``LineSide``
    """
    v = orient2dXY(a,b,p,epsilon)
    if v > epsilon:
        return LineSide.LEFT
    elif v < -epsilon:
        return LineSide.RIGHT
    return LineSide.MIDDLE

## squared distance from point p to the segment a,b.  A zero-length
## segment is treated as the point a.
def segmentPointDist2XY(a,b,p):
    """ squared XY distance from point ``p`` to the segment ``a``, ``b``"""
    dx = b[0]-a[0]
    dy = b[1]-a[1]
    px = p[0]-a[0]
    py = p[1]-a[1]
    l2 = dx*dx + dy*dy
    if l2 > 0.0:
        u = (px*dx + py*dy)/l2
        if u > 1.0:
            px = p[0]-b[0]
            py = p[1]-b[1]
        elif u > 0.0:
            px -= u*dx
            py -= u*dy
    return px*px + py*py


## bounding boxes
## --------------

def polybbox(a):
    """Compute the XY bounding box of a list of points ``a``, or
    ``False`` if the list is empty"""
    if len(a) == 0:
        return False
    minx = maxx = a[0][0]
    miny = maxy = a[0][1]
    for i in range(1,len(a)):
        x=a[i][0]
        y=a[i][1]
        if x < minx:
            minx =x
        elif x > maxx:
            maxx = x
        if y < miny:
            miny = y
        elif y > maxy:
            maxy = y
    return [ point(minx,miny),point(maxx,maxy)]

# does point p lie inside XY bounding box bbox, boundary included
def isinsidebboxXY(bbox,p,epsilon=epsilon):
    """ does point ``p`` lie inside or within epsilon of XY bounding box ``bbox``?"""
    return p[0] >= bbox[0][0] - epsilon and p[0] <= bbox[1][0] + epsilon and\
        p[1] >= bbox[0][1] - epsilon and p[1] <= bbox[1][1] + epsilon
