"""Feature scaling applied consistently to both sides of a split."""

import pandas as pd
from sklearn.preprocessing import MinMaxScaler, StandardScaler

from wdbc_harness.config import SCALING_METHODS
from wdbc_harness.data.dataset import Split
from wdbc_harness.errors import EmptyPartitionError
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


class Preprocessor:
    """Fits a scaler on the training rows and applies it to train and test."""

    def __init__(self, scaling: str = "standard"):
        if scaling not in SCALING_METHODS:
            raise ValueError(f"Unknown scaling method: {scaling}")
        self.scaling = scaling
        self.scaler = None

    def _make_scaler(self):
        if self.scaling == "standard":
            return StandardScaler()
        if self.scaling == "minmax":
            return MinMaxScaler()
        return None

    def fit_transform(self, split: Split) -> Split:
        """Return a new Split with scaled feature copies. Indices are unchanged."""
        self.scaler = self._make_scaler()
        if self.scaler is None:
            log.info("Feature scaling disabled")
            return split

        train_x = split.train.features
        if not len(train_x):
            raise EmptyPartitionError("Cannot fit a scaler on an empty training partition")
        test_x = split.test.features
        # Scaler statistics come from the training rows only
        train_scaled = pd.DataFrame(
            self.scaler.fit_transform(train_x), columns=train_x.columns
        )
        if len(test_x):
            test_scaled = pd.DataFrame(self.scaler.transform(test_x), columns=test_x.columns)
        else:
            test_scaled = test_x.copy()

        log.info("Applied %s scaling", self.scaling)

        return Split(
            train=split.train.with_features(train_scaled),
            test=split.test.with_features(test_scaled),
            train_indices=split.train_indices,
            test_indices=split.test_indices,
            fraction=split.fraction,
            seed=split.seed,
        )
