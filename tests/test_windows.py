import numpy as np
import pytest

from stftstream import StreamingSTFT, UnrecognizedWindowName, WindowType, window_coefficients


def test_display_names_match_identifiers() -> None:
    assert [str(w) for w in WindowType.values()] == [
        "Hanning",
        "Hamming",
        "Blackman",
        "Nuttall",
        "None",
    ]


@pytest.mark.parametrize("window_type", list(WindowType))
def test_parse_round_trips_display_name(window_type: WindowType) -> None:
    assert WindowType.parse(str(window_type)) is window_type
    assert WindowType.parse(str(window_type).upper()) is window_type


def test_parse_accepts_hann_alias() -> None:
    assert WindowType.parse("hann") is WindowType.HANNING
    assert WindowType.parse("HaNn") is WindowType.parse("hanning")


def test_parse_rejects_unknown_name() -> None:
    with pytest.raises(UnrecognizedWindowName, match="kaiser"):
        WindowType.parse("kaiser")


def test_parse_rejects_non_string() -> None:
    with pytest.raises(TypeError, match="str or WindowType"):
        WindowType.parse(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        StreamingSTFT(None, 8, 4)  # type: ignore[arg-type]


def test_coefficients_match_numpy_symmetric_windows() -> None:
    np.testing.assert_allclose(
        window_coefficients(WindowType.HANNING, 8), np.hanning(8), atol=1e-12
    )
    np.testing.assert_allclose(
        window_coefficients("hamming", 16), np.hamming(16), atol=1e-12
    )
    np.testing.assert_allclose(
        window_coefficients("blackman", 16), np.blackman(16), atol=1e-12
    )


def test_blackman_uses_classic_three_term_coefficients() -> None:
    win = window_coefficients(WindowType.BLACKMAN, 9)
    assert win is not None
    assert abs(win[0]) < 1e-12
    assert win[4] == pytest.approx(0.42 + 0.5 + 0.08)


def test_nuttall_is_symmetric_and_tapered() -> None:
    win = window_coefficients(WindowType.NUTTALL, 33)
    assert win is not None
    assert win.shape == (33,)
    np.testing.assert_allclose(win, win[::-1], atol=1e-12)
    assert win[16] == pytest.approx(1.0)
    assert win[0] < 1e-3


def test_none_window_is_absent() -> None:
    assert window_coefficients(WindowType.NONE, 8) is None


def test_coefficients_follow_requested_dtype() -> None:
    win = window_coefficients("hann", 8, np.float32)
    assert win is not None
    assert win.dtype == np.float32
