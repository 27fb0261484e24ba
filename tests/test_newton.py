import pytest

from numanalysis.newton import NewtonError, NewtonInterpolator, newton_interpolate

LINEAR = [(1, 3), (3, 7)]
QUADRATIC = [(1, 1), (2, 4), (3, 9)]
CONSTANT = [(5, 10)]
DUPLICATE = [(1, 2), (2, 5), (1, 8)]
UNORDERED = [(3, 9), (1, 1), (2, 4)]


@pytest.mark.parametrize(
    "points,x,expected",
    [
        (LINEAR, 2.0, 5.0),
        (LINEAR, 1.0, 3.0),
        (QUADRATIC, 2.5, 6.25),
        (QUADRATIC, 3.0, 9.0),
        (QUADRATIC, 7.0, 49.0),
        (CONSTANT, 0.0, 10.0),
        (CONSTANT, 5.0, 10.0),
        (UNORDERED, 2.5, 6.25),
        (UNORDERED, 2.0, 4.0),
        (UNORDERED, 5.0, 25.0),
        (UNORDERED, 7.0, 49.0),
    ],
)
def test_interpolation(points, x, expected):
    assert newton_interpolate(points, x) == pytest.approx(expected, rel=1e-9, abs=1e-9)


def test_duplicate_nodes_raise():
    with pytest.raises(NewtonError, match="duplicate"):
        newton_interpolate(DUPLICATE, 1.5)


def test_empty_points_raise():
    with pytest.raises(NewtonError):
        NewtonInterpolator([])


def test_divided_differences():
    interpolator = NewtonInterpolator(QUADRATIC)
    assert interpolator.nodes == (1.0, 2.0, 3.0)
    assert interpolator.coefficients == pytest.approx((1.0, 3.0, 1.0))
    assert len(interpolator) == 3


def test_interpolator_passes_through_nodes():
    interpolator = NewtonInterpolator(UNORDERED)
    for x, y in UNORDERED:
        assert interpolator.evaluate(x) == pytest.approx(y)


def test_describe():
    text = NewtonInterpolator(QUADRATIC).describe()
    assert text.splitlines() == [
        "Newton Dataset:",
        "Size: 3",
        "X Nodes: 1.000000 2.000000 3.000000",
        "Divided Differences: 1.000000 3.000000 1.000000",
    ]


def test_describe_single_node_raises():
    with pytest.raises(NewtonError):
        NewtonInterpolator(CONSTANT).describe()