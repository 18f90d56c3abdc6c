import pytest

from plotartist.norm import Norm, Norms


def test_linear_bounds_from_data():
    norm = Norm.from_norms(Norms.LINEAR)
    norm.set_bounds([2.0, 4.0, 6.0])
    assert norm.min == 2.0
    assert norm.max == 6.0
    assert norm.norm(2.0) == 0.0
    assert norm.norm(6.0) == 1.0
    assert norm.norm(4.0) == pytest.approx(0.5)


def test_default_range_before_bounds():
    norm = Norm()
    assert norm.norm(norm.min) == 0.0
    assert norm.norm(norm.max) == 1.0


def test_constant_values_widen_range():
    norm = Norm.from_norms(Norms.LINEAR)
    norm.set_bounds([3.0, 3.0])
    assert norm.min < 3.0 < norm.max
    assert norm.max - norm.min == pytest.approx(2.0)


def test_vmin_vmax_override():
    norm = Norms.LINEAR.vmin(0.0).vmax(10.0)
    norm.set_bounds([2.0, 4.0])
    assert norm.min == 0.0
    assert norm.max == 10.0


def test_vmin_only_keeps_data_max():
    norm = Norms.LINEAR.vmin(-5.0)
    norm.set_bounds([1.0, 7.0])
    assert norm.min == -5.0
    assert norm.max == 7.0


def test_log10_midpoint_invariant():
    norm = Norm.from_norms(Norms.LOG10)
    norm.set_bounds([1.0, 100.0])
    assert norm.norm(1.0) == pytest.approx(0.0)
    assert norm.norm(100.0) == pytest.approx(1.0)
    assert norm.norm(10.0) == pytest.approx((norm.norm(1.0) + norm.norm(100.0)) / 2)


@pytest.mark.parametrize("kind", [Norms.LOG2, Norms.LN])
def test_log_norms_geometric_midpoint(kind):
    norm = Norm.from_norms(kind)
    norm.set_bounds([2.0, 8.0])
    assert norm.norm(4.0) == pytest.approx(0.5)


def test_custom_scale():
    norm = Norm(lambda v: v * v)
    norm.set_bounds([1.0, 3.0])
    assert norm.min == 1.0
    assert norm.max == 9.0
    assert norm(3.0) == 1.0


def test_empty_values_leave_inverted_range():
    norm = Norm()
    norm.set_bounds([])
    assert norm.min > norm.max


def test_nan_ignored_in_bounds():
    norm = Norm()
    norm.set_bounds([1.0, float("nan"), 5.0])
    assert norm.min == 1.0
    assert norm.max == 5.0


def test_two_dimensional_input():
    norm = Norm()
    norm.set_bounds([[1.0, 2.0], [3.0, 4.0]])
    assert (norm.min, norm.max) == (1.0, 4.0)