import pytest

from numanalysis.hermite import HermiteError, HermiteInterpolator, HermitePoint


LINEAR = [(1, 3, 2), (3, 7, 2)]
QUADRATIC = [(1, 1, 2), (2, 4, 4), (3, 9, 6)]
TRIG = [
    (0, 0, 1),
    (1.57079632679, 1, 0),
    (3.14159265359, 0, -1),
    (4.71238898038, -1, 0),
    (6.28318530718, 0, 1),
]


@pytest.mark.parametrize(
    "points, x, y_expected, dy_expected, tol",
    [
        (LINEAR, 2.0, 5.0, 2.0, 1e-9),
        (LINEAR, 1.0, 3.0, 2.0, 1e-9),
        (QUADRATIC, 2.5, 6.25, 5.0, 1e-9),
        (QUADRATIC, 3.0, 9.0, 6.0, 1e-9),
        (QUADRATIC, 7.0, 49.0, 14.0, 1e-9),
        (TRIG, 3.0, 0.14112000806, -0.9899924966, 1e-2),
        (TRIG, 4.0, -0.75680249531, -0.65364362086, 1e-2),
        (TRIG, 5.0, -0.95892427466, 0.28366218546, 1e-2),
    ],
)
def test_source_cases(points, x, y_expected, dy_expected, tol):
    interpolator = HermiteInterpolator(points)
    y, dy = interpolator.evaluate(x)
    assert y == pytest.approx(y_expected, abs=tol, rel=tol)
    assert dy == pytest.approx(dy_expected, abs=tol, rel=tol)


def test_from_arrays_matches_points():
    xs, ys, dys = [1.0, 2.0, 3.0], [1.0, 4.0, 9.0], [2.0, 4.0, 6.0]
    from_arrays = HermiteInterpolator.from_arrays(xs, ys, dys)
    from_points = HermiteInterpolator(QUADRATIC)
    assert from_arrays.coefficients == pytest.approx(from_points.coefficients)
    assert from_arrays.points[1] == HermitePoint(2.0, 4.0, 4.0)


def test_reproduces_values_and_derivatives_at_nodes():
    interpolator = HermiteInterpolator(TRIG)
    for point in interpolator.points:
        y, dy = interpolator.evaluate(point.x)
        assert y == pytest.approx(point.y, abs=1e-9)
        assert dy == pytest.approx(point.dy, abs=1e-9)


def test_single_point_is_tangent_line():
    interpolator = HermiteInterpolator([(1.0, 3.0, 2.0)])
    assert interpolator.evaluate(2.0) == pytest.approx((5.0, 2.0))
    assert len(interpolator) == 1


def test_nodes_are_doubled():
    interpolator = HermiteInterpolator(LINEAR)
    assert interpolator.nodes == (1.0, 1.0, 3.0, 3.0)


def test_empty_points_rejected():
    with pytest.raises(HermiteError):
        HermiteInterpolator([])


def test_duplicate_node_rejected():
    with pytest.raises(HermiteError):
        HermiteInterpolator([(1, 1, 2), (1, 1, 2)])


def test_length_mismatch_rejected():
    with pytest.raises(HermiteError):
        HermiteInterpolator.from_arrays([1.0, 2.0], [1.0], [0.0, 0.0])