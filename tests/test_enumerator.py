import pytest
from polykit.geom import point, pclose
from polykit.enumerator import *
from polykit.normalize import shift_left

## unit tests for polykit enumerator.py

def square():
    return [point(0,0),point(10,0),point(10,10),point(0,10)]

def duplicate(points,times=2):
    return [point(p) for p in points for _ in range(times)]


def test_circular():
    enumer = CircularEnumerator(square())
    assert enumer.index == 0
    for i in (1,2,3,0):
        assert enumer.next()
        assert enumer.index == i
    for i in (3,2,1,0):
        assert enumer.prev()
        assert enumer.index == i


def test_robust():
    enumer = RobustCircularEnumerator(duplicate(square()))
    assert enumer.index == 0
    for i in (2,4,6,0):
        assert enumer.next()
        assert enumer.index == i
    for i in (6,4,2,0):
        assert enumer.prev()
        assert enumer.index == i


def test_robust_wrapped_run():
    points = duplicate(square())
    shift_left(points,1)
    enumer = RobustCircularEnumerator(points,0,True)
    assert enumer.index == 7
    for i in (1,3,5,7):
        enumer.next()
        assert enumer.index == i
    for i in (5,3,1,7):
        enumer.prev()
        assert enumer.index == i


def test_robust_tolerance():
    points = [point(0,0),point(1e-10,0),point(10,0),point(10,10)]
    enumer = RobustCircularEnumerator(points)
    enumer.next()
    assert enumer.index == 2
    enumer = RobustCircularEnumerator(points,epsilon=1e-12)
    enumer.next()
    assert enumer.index == 1
    assert enumer.epsilon == 1e-12


def test_single_logical_vertex():
    points = [point(3,3),point(3,3),point(3,3)]
    enumer = RobustCircularEnumerator(points,1)
    assert not enumer.next()
    assert enumer.index == 1
    assert not enumer.prev()
    assert enumer.index == 1


def test_round_trip():
    for points in (square(),duplicate(square()),duplicate(square(),3)):
        for i in range(len(points)):
            enumer = RobustCircularEnumerator(points,i)
            before = enumer.point
            enumer.next()
            enumer.prev()
            assert pclose(enumer.point,before)
            enumer.prev()
            enumer.next()
            assert pclose(enumer.point,before)


def test_clone():
    points = duplicate(square())
    a = RobustCircularEnumerator(points,0,True,1e-6)
    b = a.clone()
    assert b.equals(a)
    assert b.epsilon == 1e-6
    b.next()
    assert not b.equals(a)
    assert a.index == 0
    c = CircularEnumerator(points,3).clone()
    assert c.index == 3
    assert c.point is points[3]


def test_new_enumerator():
    points = duplicate(square())
    shift_left(points,1)
    robust = new_enumerator(points)
    assert isinstance(robust,RobustCircularEnumerator)
    assert robust.index == 7
    naive = new_enumerator(points,0,False)
    assert isinstance(naive,CircularEnumerator)
    assert naive.index == 0


def test_abstract():
    with pytest.raises(TypeError):
        PolyEnumerator()


def test_ring_distance():
    assert ring_distance(0,3,8) == 3
    assert ring_distance(6,1,8) == 3
    assert ring_distance(5,5,8) == 0


def test_chained_run_passes_start():
    ## each point of the last run is within epsilon of (0,0) but the
    ## first and last points are not within epsilon of each other
    points = [point(-0.5,0),point(10,0),point(10,10),point(0,0),point(0.9,0)]
    first = RobustCircularEnumerator(points,0,True,1.0)
    assert first.index == 0
    enumer = first.clone()
    travelled = 0
    visited = []
    while travelled < len(points):
        visited.append(enumer.index)
        start = enumer.index
        assert enumer.next()
        travelled += ring_distance(start,enumer.index,len(points))
    assert visited == [0,1,2,3]
    assert enumer.index == 1
