import numpy as np
import pytest

from wdbc_harness.data import decode, encode, encode_labels
from wdbc_harness.errors import InvalidLabelError


def test_encode_fixed_mapping():
    assert encode("B") == 0
    assert encode("M") == 1


@pytest.mark.parametrize("raw", ["X", "b", "m", " M", "", None, 1, "benign"])
def test_encode_rejects_unknown_labels(raw):
    with pytest.raises(InvalidLabelError):
        encode(raw)


def test_encode_labels_preserves_order():
    result = encode_labels(["M", "B", "B", "M"])
    assert result.tolist() == [1, 0, 0, 1]
    assert result.dtype.kind == "i"


def test_encode_labels_fails_on_any_bad_value():
    with pytest.raises(InvalidLabelError):
        encode_labels(["B", "M", "?"])


def test_decode_inverts_encode():
    for raw in ("B", "M"):
        assert decode(encode(raw)) == raw
    assert decode(np.int64(1)) == "M"


@pytest.mark.parametrize("value", [2, -1, 0.5, True, "1"])
def test_decode_rejects_unknown_values(value):
    with pytest.raises(InvalidLabelError):
        decode(value)
