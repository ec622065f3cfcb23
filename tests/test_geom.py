import pytest
from polykit.geom import *
## unit tests for polykit geom.py

class TestPoint:
    """unit tests for polykit point functions"""

    def test_create(self):
        a = point(5,0)
        b = point(0,5,-2)
        c = point((1.5,2.5))
        aa = point(a)
        assert a == [5,0,0,1]
        assert b == [0,5,-2,1]
        assert c == [1.5,2.5,0,1]
        assert aa == a and aa is not a

    def test_bad_point(self):
        with pytest.raises(ValueError):
            point('a')
        with pytest.raises(ValueError):
            point(1,2,3,-1)

    def test_discriminate(self):
        assert ispoint(point(5,0))
        assert ispoint([0,2,2,1])
        assert not ispoint([1,2,3,-1])
        assert not ispoint([1,2])

    def test_format(self):
        assert vstr(point(5,0)) == '[5, 0]'
        assert vstr(point(2,3,2)) == '[2, 3, 2]'
        assert vstr([point(0,0),point(1,1)]) == '[[0, 0], [1, 1]]'
        assert vstr(7) == '7'


class TestTolerance:
    def test_close(self):
        assert close(1.0,1.0+1e-10)
        assert not close(1.0,1.1)
        assert close(1.0,1.5,epsilon=0.5)

    def test_pclose(self):
        assert pclose(point(0,0),point(1e-10,-1e-10))
        assert pclose((3,4),point(3,4))
        assert not pclose(point(0,0),point(0,1e-6))
        assert pclose(point(0,0),point(0,1e-6),epsilon=1e-5)

    def test_vclose(self):
        assert vclose(point(1,1),point(1,1+1e-10))
        assert not vclose(point(1,1),point(1.1,1))

    def test_lexcompare(self):
        assert lexcompareXY(point(0,5),point(1,0)) == -1
        assert lexcompareXY(point(1,0),point(1,5)) == -1
        assert lexcompareXY(point(2,0),point(1,9)) == 1
        assert lexcompareXY(point(1,1),point(1+1e-10,1-1e-10)) == 0


class TestOperations:
    def test_vect(self):
        a = point(5,0)
        b = point(0,5)
        assert close(mag(a),5.0)
        assert vclose(sub(a,b),point(5,-5))
        assert close(mag(sub(a,b)),sqrt(50))
        assert isvect(sub(a,b))
        assert not isvect([1,2,3])

    def test_lerp(self):
        assert vclose(lerp(point(0,0),point(10,20),0.25),point(2.5,5))
        assert vclose(lerp(point(0,0),point(10,20),1.0),point(10,20))


class TestSide:
    def test_whichside(self):
        a = point(0,0)
        b = point(10,0)
        assert whichsideXY(a,b,point(5,5)) == LineSide.LEFT
        assert whichsideXY(a,b,point(5,-5)) == LineSide.RIGHT
        assert whichsideXY(a,b,point(20,0)) == LineSide.MIDDLE
        assert whichsideXY(b,a,point(5,5)) == LineSide.RIGHT

    def test_orient2d_sign(self):
        assert orient2dXY(point(0,0),point(1,0),point(0,1)) == 1.0
        assert orient2dXY(point(0,0),point(0,1),point(1,0)) == -1.0

    def test_orient2d_nearly_collinear(self):
        a = point(0.1,0.1)
        b = point(0.2,0.2)
        c = point(0.3,0.3)
        assert abs(orient2dXY(a,b,c)) < 1e-15
        assert whichsideXY(a,b,c) == LineSide.MIDDLE

    def test_orient2d_tolerance(self):
        a = point(0,0)
        b = point(1,0)
        assert whichsideXY(a,b,point(0.5,5e-10)) == LineSide.MIDDLE
        assert whichsideXY(a,b,point(0.5,5e-9)) == LineSide.LEFT
        assert whichsideXY(a,b,point(0.5,5e-9),epsilon=1e-8) == LineSide.MIDDLE


class TestSegmentDistance:
    def test_inside(self):
        assert close(segmentPointDist2XY(point(0,0),point(10,0),point(5,3)),9.0)

    def test_ends(self):
        a = point(0,0)
        b = point(10,0)
        assert close(segmentPointDist2XY(a,b,point(13,4)),25.0)
        assert close(segmentPointDist2XY(a,b,point(-3,4)),25.0)

    def test_zero_length(self):
        a = point(0,0)
        assert close(segmentPointDist2XY(a,a,point(3,4)),25.0)


class TestBbox:
    def test_polybbox(self):
        pts = [point(0,0),point(10,0),point(10,10),point(-2,10)]
        assert polybbox(pts) == [point(-2,0),point(10,10)]
        assert polybbox([]) is False
        assert polybbox([point(3,4)]) == [point(3,4),point(3,4)]

    def test_inside(self):
        bb = [point(0,0),point(10,10)]
        assert isinsidebboxXY(bb,point(5,5))
        assert isinsidebboxXY(bb,point(10,0))
        assert isinsidebboxXY(bb,point(10+1e-10,5))
        assert not isinsidebboxXY(bb,point(11,5))
        assert isinsidebboxXY(bb,point(11,5),epsilon=1.0)
