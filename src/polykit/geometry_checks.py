"""Validation helpers for polykit polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from polykit.enumerator import RobustCircularEnumerator, ring_distance
from polykit.geom import epsilon, pclose, vstr
from polykit.orientation import Orientation, polygon_orientation


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


def is_closed_polygon(points: Sequence[Sequence[float]], tol: float = epsilon) -> bool:
    """Return ``True`` if the last point repeats the first within ``tol``.

    polykit rings are closed implicitly, so such a point is a duplicate
    vertex rather than a requirement.
    """

    if len(points) < 2:
        return False
    return pclose(points[0], points[-1], tol)


def duplicate_runs(points: Sequence, tol: float = epsilon) -> List[int]:
    """Return the start index of every run of two or more equal points."""

    n = len(points)
    if n < 2:
        return []
    enumer = RobustCircularEnumerator(points, 0, True, tol)
    runs = []
    travelled = 0
    while travelled < n:
        start = enumer.index
        nxt = (start + 1) % n
        if nxt != start and pclose(points[start], points[nxt], tol):
            runs.append(start)
        if not enumer.next():
            break
        travelled += ring_distance(start, enumer.index, n)
    return sorted(runs)


def check_polygon(points: Sequence, tol: float = epsilon) -> CheckResult:
    """Report degenerate features of a polygon without raising."""

    warnings: List[str] = []
    n = len(points)
    if n < 3:
        return CheckResult(False, [f'{n} vertices, at least 3 required'])

    enumer = RobustCircularEnumerator(points, 0, True, tol)
    if not enumer.clone().next():
        return CheckResult(False, [f'all vertices coincide at {vstr(points[0])}'])

    runs = duplicate_runs(points, tol)
    if runs:
        warnings.append(f'duplicate vertices at indices: {runs}')
    if is_closed_polygon(points, tol):
        warnings.append('last vertex repeats the first')

    ok = True
    if polygon_orientation(points, True, tol) == Orientation.DEGENERATE:
        ok = False
        warnings.append('degenerate orientation')

    return CheckResult(ok, warnings)


__all__ = [
    'CheckResult',
    'is_closed_polygon',
    'duplicate_runs',
    'check_polygon',
]
