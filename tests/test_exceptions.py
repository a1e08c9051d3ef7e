import pytest

from inkset.exceptions import (
    BuilderConsumedError,
    DecodeError,
    DegenerateSketchError,
    InksetError,
    InvalidBoundingBoxError,
    InvalidTimestampError,
    MetadataError,
)


def test_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        raise DecodeError("missing field `x`", field="x")

    assert "missing field `x`" in str(exc_info.value)
    assert exc_info.value.field == "x"
    assert exc_info.value.index is None


def test_decode_error_with_index():
    error = DecodeError("invalid length 2", field="x", index=2)

    assert error.index == 2


@pytest.mark.parametrize(
    "error_class, builtin",
    [
        (InvalidBoundingBoxError, ValueError),
        (MetadataError, TypeError),
        (BuilderConsumedError, RuntimeError),
        (DegenerateSketchError, ValueError),
        (DecodeError, ValueError),
        (InvalidTimestampError, ValueError),
    ],
)
def test_exceptions_inherit_from_base(error_class, builtin):
    assert issubclass(error_class, InksetError)
    assert issubclass(error_class, builtin)
    assert issubclass(InksetError, Exception)
