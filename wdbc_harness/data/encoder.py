"""Diagnosis label encoding."""

import numpy as np

from wdbc_harness.config import LABEL_MAPPING
from wdbc_harness.errors import InvalidLabelError

_REVERSE_MAPPING = {v: k for k, v in LABEL_MAPPING.items()}


def encode(raw_label) -> int:
    """Map a raw diagnosis ("B" or "M") to 0 or 1.

    No coercion is applied: lowercase or padded labels are rejected.
    """
    if not isinstance(raw_label, str) or raw_label not in LABEL_MAPPING:
        raise InvalidLabelError(
            f"Unrecognized diagnosis label {raw_label!r}; "
            f"expected one of {sorted(LABEL_MAPPING)}"
        )
    return LABEL_MAPPING[raw_label]


def encode_labels(labels) -> np.ndarray:
    """Encode a sequence of raw labels into an int array."""
    return np.array([encode(label) for label in labels], dtype=int)


def decode(value) -> str:
    """Inverse of :func:`encode`."""
    # bool is an int subclass but never a valid encoded label
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidLabelError(f"Unrecognized encoded label {value!r}")
    if int(value) not in _REVERSE_MAPPING:
        raise InvalidLabelError(f"Unrecognized encoded label {value!r}")
    return _REVERSE_MAPPING[int(value)]
