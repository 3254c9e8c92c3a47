"""In-memory dataset and split containers."""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from wdbc_harness.data.encoder import encode_labels
from wdbc_harness.errors import SchemaMismatchError


@dataclass(frozen=True)
class Dataset:
    """
    An ordered table of records sharing one feature schema.

    Attributes:
        ids: record identifiers (not used for modelling)
        features: numeric feature columns, one row per record
        labels: raw diagnosis labels ("B" / "M")
    """

    ids: pd.Series
    features: pd.DataFrame
    labels: pd.Series

    def __post_init__(self):
        n = len(self.features)
        if len(self.ids) != n or len(self.labels) != n:
            raise SchemaMismatchError(
                f"Dataset columns differ in length: ids={len(self.ids)}, "
                f"features={n}, labels={len(self.labels)}"
            )

    def __len__(self) -> int:
        return len(self.features)

    @property
    def feature_names(self) -> list[str]:
        return list(self.features.columns)

    def encoded_labels(self) -> np.ndarray:
        return encode_labels(self.labels)

    def take(self, indices) -> "Dataset":
        """Return a new Dataset holding the rows at the given positions."""
        indices = np.asarray(indices, dtype=int)
        return Dataset(
            ids=self.ids.iloc[indices].reset_index(drop=True),
            features=self.features.iloc[indices].reset_index(drop=True),
            labels=self.labels.iloc[indices].reset_index(drop=True),
        )

    def with_features(self, features: pd.DataFrame) -> "Dataset":
        """Return a copy with the feature table replaced (same rows)."""
        return Dataset(ids=self.ids.copy(), features=features, labels=self.labels.copy())

    def class_distribution(self) -> dict:
        return self.labels.value_counts().to_dict()


@dataclass(frozen=True)
class Split:
    """Train/test partition of a Dataset by positional row index."""

    train: Dataset
    test: Dataset
    train_indices: np.ndarray
    test_indices: np.ndarray
    fraction: float
    seed: int

    @property
    def sizes(self) -> dict:
        return {"train": len(self.train), "test": len(self.test)}
