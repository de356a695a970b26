import numpy as np
import pytest

from stftstream import log10_positive


def test_log10_positive_clamps_small_values() -> None:
    assert log10_positive(0.0) == 0.0
    assert log10_positive(1.0) == 0.0
    assert log10_positive(0.5) == 0.0
    assert log10_positive(1e-30) == 0.0


def test_log10_positive_powers_of_ten() -> None:
    assert log10_positive(10.0) == pytest.approx(1.0)
    assert log10_positive(100.0) == pytest.approx(2.0)
    assert log10_positive(1000.0) == pytest.approx(3.0)


def test_log10_positive_propagates_nan() -> None:
    assert np.isnan(log10_positive(-1.0))
    assert np.isnan(log10_positive(np.nan))


def test_log10_positive_keeps_infinity() -> None:
    assert log10_positive(np.inf) == np.inf


def test_log10_positive_on_arrays() -> None:
    values = np.array([0.0, 0.1, 1.0, 10.0, -5.0], dtype=np.float32)
    out = log10_positive(values)
    assert out.dtype == np.float32
    np.testing.assert_allclose(out[:4], [0.0, 0.0, 0.0, 1.0], atol=1e-6)
    assert np.isnan(out[4])


def test_log10_positive_accepts_integers() -> None:
    assert log10_positive(100) == pytest.approx(2.0)
    assert log10_positive(0) == 0.0
