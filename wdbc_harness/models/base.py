"""Uniform fit/predict interface over concrete classifier families."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from wdbc_harness.config import POSITIVE_CLASS
from wdbc_harness.data.dataset import Dataset
from wdbc_harness.errors import (
    DegenerateLabelSetError,
    EmptyPartitionError,
    ModelStateError,
    SchemaMismatchError,
)
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TrainedModel:
    """Fitted artifact owned by the adapter that produced it."""

    adapter_name: str
    estimator: object
    feature_names: tuple
    hyperparameters: dict = field(default_factory=dict)


class ModelAdapter(ABC):
    """
    Wraps one classifier family behind ``fit`` and ``predict``.

    Subclasses declare ``name``, ``description`` and
    ``default_hyperparameters`` and build the estimator. Hyperparameters are
    handed to the estimator constructor as given; nothing here interprets
    them.
    """

    name: str = ""
    description: str = ""
    default_hyperparameters: dict = {}

    @abstractmethod
    def build_estimator(self, hyperparameters: dict):
        """Return a new, unfitted estimator."""

    def resolve_hyperparameters(self, hyperparameters: dict | None = None) -> dict:
        params = dict(self.default_hyperparameters)
        params.update(hyperparameters or {})
        return params

    def fit(self, train: Dataset, hyperparameters: dict | None = None) -> TrainedModel:
        if len(train) == 0:
            raise EmptyPartitionError(f"{self.name}: cannot fit on an empty training partition")

        y = train.encoded_labels()
        classes = np.unique(y)
        if len(classes) < 2:
            raise DegenerateLabelSetError(
                f"{self.name}: training partition holds a single class {classes.tolist()}"
            )

        params = self.resolve_hyperparameters(hyperparameters)
        estimator = self.build_estimator(params)
        log.info("Fitting %s on %d samples", self.name, len(train))
        estimator.fit(train.features.to_numpy(), y)

        return TrainedModel(
            adapter_name=self.name,
            estimator=estimator,
            feature_names=tuple(train.feature_names),
            hyperparameters=params,
        )

    def _feature_matrix(self, model: TrainedModel, rows) -> np.ndarray:
        frame = rows.features if isinstance(rows, Dataset) else rows
        if not isinstance(frame, pd.DataFrame):
            raise TypeError(f"rows must be a Dataset or DataFrame, not {type(rows)}")
        missing = [c for c in model.feature_names if c not in frame.columns]
        if missing:
            raise SchemaMismatchError(f"Rows are missing trained feature columns: {missing}")
        return frame[list(model.feature_names)].to_numpy(dtype=float)

    def predict(self, model: TrainedModel, rows) -> np.ndarray:
        """Malignant-class probability for each row, in row order."""
        if model.adapter_name != self.name:
            raise ModelStateError(
                f"Model trained by '{model.adapter_name}' passed to adapter '{self.name}'"
            )

        X = self._feature_matrix(model, rows)
        if len(X) == 0:
            return np.empty(0, dtype=float)

        proba = model.estimator.predict_proba(X)
        positive_column = list(model.estimator.classes_).index(POSITIVE_CLASS)
        return np.asarray(proba[:, positive_column], dtype=float)

    def feature_importances(self, model: TrainedModel) -> list[tuple[str, float]]:
        """Feature importances sorted descending, when the estimator exposes them."""
        importances = getattr(model.estimator, "feature_importances_", None)
        if importances is None:
            return []
        paired = [(name, float(imp)) for name, imp in zip(model.feature_names, importances)]
        paired.sort(key=lambda x: x[1], reverse=True)
        return paired

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
