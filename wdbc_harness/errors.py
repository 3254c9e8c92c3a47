"""
Errors raised by the evaluation harness.

Every error propagates to the immediate caller. The harness has no fallback
model and no default prediction.
"""


class HarnessError(Exception):
    """Base class for all harness errors."""


class SchemaMismatchError(HarnessError):
    """Raised when input data is missing declared feature columns or holds malformed values."""


class InvalidLabelError(HarnessError):
    """Raised when a diagnosis label is outside the fixed label mapping."""


class EmptyPartitionError(HarnessError):
    """Raised when an operation that needs rows receives an empty partition."""


class LengthMismatchError(HarnessError):
    """Raised when scores and truth labels differ in length."""


class DegenerateLabelSetError(HarnessError):
    """Raised when a label set holds a single class, e.g. AUC is undefined."""


class ModelStateError(HarnessError):
    """Raised when a trained model is handed to an adapter that did not produce it."""
