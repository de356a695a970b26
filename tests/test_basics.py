from stftstream import (
    InsufficientSamples,
    InvalidConfiguration,
    SizeMismatch,
    StreamingSTFT,
    STFTError,
    UnrecognizedWindowName,
    WindowType,
    log10_positive,
)


def test_public_imports() -> None:
    assert StreamingSTFT is not None
    assert WindowType is not None
    assert log10_positive is not None


def test_error_hierarchy() -> None:
    assert issubclass(InvalidConfiguration, STFTError)
    assert issubclass(InvalidConfiguration, ValueError)
    assert issubclass(InsufficientSamples, RuntimeError)
    assert issubclass(SizeMismatch, ValueError)
    assert issubclass(UnrecognizedWindowName, ValueError)
