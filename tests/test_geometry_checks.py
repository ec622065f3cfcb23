from polykit.geom import point
from polykit.geometry_checks import (
    CheckResult,
    check_polygon,
    duplicate_runs,
    is_closed_polygon,
)


def _square():
    return [
        point(0, 0),
        point(10, 0),
        point(10, 10),
        point(0, 10),
    ]


def _duplicated(points):
    return [point(p) for p in points for _ in range(2)]


def test_is_closed_polygon_true():
    pts = _square() + [point(0, 0)]
    assert is_closed_polygon(pts)


def test_is_closed_polygon_false():
    assert not is_closed_polygon(_square())
    assert not is_closed_polygon([point(0, 0)])


def test_is_closed_polygon_tolerance():
    pts = _square() + [point(1e-10, 0)]
    assert is_closed_polygon(pts)
    assert not is_closed_polygon(pts, tol=1e-12)


def test_duplicate_runs():
    assert duplicate_runs(_square()) == []
    assert duplicate_runs(_duplicated(_square())) == [0, 2, 4, 6]
    assert duplicate_runs(_square() + [point(0, 0)]) == [4]
    assert duplicate_runs([]) == []


def test_check_square():
    result = check_polygon(_square())
    assert isinstance(result, CheckResult)
    assert result.ok
    assert result
    assert result.warnings == []


def test_check_duplicates_warns():
    result = check_polygon(_duplicated(_square()))
    assert result.ok
    assert len(result.warnings) == 1
    assert 'duplicate vertices' in result.warnings[0]


def test_check_closing_vertex_warns():
    result = check_polygon(_square() + [point(0, 0)])
    assert result.ok
    assert any('repeats the first' in w for w in result.warnings)


def test_check_too_few():
    result = check_polygon([point(0, 0), point(1, 0)])
    assert not result
    assert 'at least 3' in result.warnings[0]


def test_check_coincident():
    result = check_polygon([point(2, 2) for _ in range(4)])
    assert not result.ok
    assert 'coincide' in result.warnings[0]


def test_check_collinear():
    result = check_polygon([point(0, 0), point(5, 0), point(10, 0)])
    assert not result.ok
    assert result.warnings == ['degenerate orientation']


def _chained_ring(scale=1.0):
    return [
        point(-0.5 * scale, 0),
        point(10, 0),
        point(10, 10),
        point(0, 0),
        point(0.9 * scale, 0),
    ]


def test_duplicate_runs_chained():
    assert duplicate_runs(_chained_ring(), tol=1.0) == [3]
    assert duplicate_runs(_chained_ring(1e-9)) == [3]


def test_check_chained():
    result = check_polygon(_chained_ring(1e-9))
    assert result.ok
    assert result.warnings == ['duplicate vertices at indices: [3]']
