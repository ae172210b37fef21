import sys, os
sys.path.append(os.path.realpath(os.path.dirname(__file__)+"/.."))

import pytest

from curveconfig import DEFAULT_CONFIG, CurveConfig, build_curve, build_field
from elliptic import InvalidScalar, point_mul
from findpoints import (curve_point_count, enumerate_curve_points, enumerate_field_elements,
                        find_full_r_torsion_points, main)

# Note: the search is O(p^4) field operations for the points and
# O(#E log r) group operations for the torsion, so only tiny fields
# are exercised here.

curve = build_curve(DEFAULT_CONFIG)

# y^2 = x^3 + x + 1 over F_5[t]/(t^2 + 2), ordered by (x, y)
GOLDEN_POINTS = [
    ((0, 0), (1, 0)), ((0, 0), (4, 0)),
    ((1, 0), (0, 1)), ((1, 0), (0, 4)),
    ((1, 2), (1, 1)), ((1, 2), (4, 4)),
    ((1, 3), (1, 4)), ((1, 3), (4, 1)),
    ((2, 0), (1, 0)), ((2, 0), (4, 0)),
    ((2, 2), (0, 1)), ((2, 2), (0, 4)),
    ((2, 3), (0, 1)), ((2, 3), (0, 4)),
    ((3, 0), (1, 0)), ((3, 0), (4, 0)),
    ((3, 1), (1, 3)), ((3, 1), (4, 2)),
    ((3, 2), (2, 0)), ((3, 2), (3, 0)),
    ((3, 3), (2, 0)), ((3, 3), (3, 0)),
    ((3, 4), (1, 2)), ((3, 4), (4, 3)),
    ((4, 0), (2, 0)), ((4, 0), (3, 0)),
]

# the 3-division polynomial 3x^4 + 6x^2 + 12x - 1 has roots 1, 2, 1 + 2t, 1 + 3t
GOLDEN_3_TORSION = [
    ((1, 0), (0, 1)), ((1, 0), (0, 4)),
    ((1, 2), (1, 1)), ((1, 2), (4, 4)),
    ((1, 3), (1, 4)), ((1, 3), (4, 1)),
    ((2, 0), (1, 0)), ((2, 0), (4, 0)),
]


def coordinates(points):
    return [((P.x.a, P.x.b), (P.y.a, P.y.b)) for P in points]


def test_enumerate_field_elements():
    elements = enumerate_field_elements(build_field())
    assert len(elements) == 25
    assert (elements[0].a, elements[0].b) == (0, 0)
    assert (elements[1].a, elements[1].b) == (0, 1)
    assert (elements[-1].a, elements[-1].b) == (4, 4)


def test_enumerate_curve_points():
    points = enumerate_curve_points(curve)
    assert len(points) == 27
    assert points[-1].isInfinity()
    assert not any(P.isInfinity() for P in points[:-1])
    assert coordinates(points[:-1]) == GOLDEN_POINTS
    assert len(set(points)) == len(points)
    for P in points[:-1]:
        assert curve.testPoint(P.x, P.y)


def test_curve_point_count():
    assert curve_point_count(curve) == 27


def test_two_torsion_is_trivial():
    # 2-torsion points are the ones with y = 0, and this curve has none
    assert not [P for P in enumerate_curve_points(curve) if not P.isInfinity() and P.y == 0]
    torsion = find_full_r_torsion_points(curve, 2)
    assert torsion == [curve.infinity()]


def test_three_torsion():
    torsion = find_full_r_torsion_points(curve, 3)
    assert len(torsion) == 9
    assert torsion[-1].isInfinity()
    assert coordinates(torsion[:-1]) == GOLDEN_3_TORSION


def test_group_has_exponent_nine():
    # E(F_25) is Z/9 x Z/3
    points = enumerate_curve_points(curve)
    assert find_full_r_torsion_points(curve, 9) == points
    assert find_full_r_torsion_points(curve, 27) == points
    assert find_full_r_torsion_points(curve, 1) == [curve.infinity()]


def test_torsion_is_exactly_the_kernel():
    points = enumerate_curve_points(curve)
    for r in range(1, 13):
        torsion = find_full_r_torsion_points(curve, r)
        assert len(set(torsion)) == len(torsion)
        assert set(torsion) == set(P for P in points if point_mul(P, r).isInfinity())
        assert curve.infinity() in torsion


def test_bad_torsion_order():
    for r in (0, -1, -3):
        with pytest.raises(InvalidScalar):
            find_full_r_torsion_points(curve, r)
    with pytest.raises(TypeError):
        find_full_r_torsion_points(curve, 1.5)


def test_other_curve():
    # over F_7 the curve has 5 points (trace 3), so 50 - (9 - 14) over F_49
    other = build_curve(CurveConfig(p=7, c=1, a=(1, 0), b=(1, 0)))
    points = enumerate_curve_points(other)
    assert len(points) == 55
    assert find_full_r_torsion_points(other, 55) == points


def test_main(capsys):
    assert main(["findpoints.py"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Elements of F(5^2):"
    assert lines[1:26] == [str(x) for x in enumerate_field_elements(build_field())]
    assert "Full 3-torsion points on the curve:" in lines
    start = lines.index("Full 3-torsion points on the curve:")
    assert lines[start + 1:] == [str(P) for P in find_full_r_torsion_points(curve, 3)]
    assert lines[-1] == "O"


def test_main_with_order(capsys):
    assert main(["findpoints.py", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Full 2-torsion points on the curve:", "O"]


def test_main_errors(capsys):
    assert main(["findpoints.py", "three"]) == 2
    assert main(["findpoints.py", "1", "2"]) == 2
    assert main(["findpoints.py", "0"]) == 1
    assert "Error" in capsys.readouterr().out
