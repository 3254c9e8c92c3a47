"""Confusion-matrix and AUC scoring of predicted malignancy scores."""

from dataclasses import asdict, dataclass

import numpy as np
from sklearn.metrics import confusion_matrix, roc_auc_score

from wdbc_harness.config import DEFAULT_THRESHOLD, POSITIVE_CLASS
from wdbc_harness.errors import (
    DegenerateLabelSetError,
    EmptyPartitionError,
    InvalidLabelError,
    LengthMismatchError,
)


def _ratio(num: int, den: int) -> float:
    return num / den if den else 0.0


@dataclass(frozen=True)
class EvaluationResult:
    """Confusion-matrix counts and AUC for one model on one test partition."""

    tp: int
    tn: int
    fp: int
    fn: int
    auc: float
    threshold: float = DEFAULT_THRESHOLD

    @property
    def n_samples(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def accuracy(self) -> float:
        return _ratio(self.tp + self.tn, self.n_samples)

    @property
    def sensitivity(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    recall = sensitivity

    @property
    def specificity(self) -> float:
        return _ratio(self.tn, self.tn + self.fp)

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def f1(self) -> float:
        return _ratio(2 * self.tp, 2 * self.tp + self.fp + self.fn)

    def confusion_matrix(self) -> np.ndarray:
        """2x2 matrix, rows = truth (benign, malignant), columns = prediction."""
        return np.array([[self.tn, self.fp], [self.fn, self.tp]])

    def to_dict(self) -> dict:
        d = asdict(self)
        d.update(
            n_samples=self.n_samples,
            accuracy=round(self.accuracy, 4),
            sensitivity=round(self.sensitivity, 4),
            specificity=round(self.specificity, 4),
            precision=round(self.precision, 4),
            f1=round(self.f1, 4),
        )
        return d


def evaluate(scores, truth, threshold: float = DEFAULT_THRESHOLD) -> EvaluationResult:
    """
    Score predictions against true encoded labels.

    A score at or above ``threshold`` counts as a malignant prediction. AUC
    is computed from the raw scores, the confusion matrix from the
    thresholded ones.
    """
    scores = np.asarray(scores, dtype=float).ravel()
    truth = np.asarray(truth).ravel()

    if len(scores) != len(truth):
        raise LengthMismatchError(
            f"Got {len(scores)} scores for {len(truth)} truth labels"
        )
    if len(scores) == 0:
        raise EmptyPartitionError("Cannot evaluate an empty test partition")
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be in [0, 1], got {threshold}")

    bad_labels = sorted(set(truth.tolist()) - {0, 1})
    if bad_labels:
        raise InvalidLabelError(f"Truth labels must be 0 or 1, got {bad_labels}")
    truth = truth.astype(int)

    if np.isnan(scores).any() or scores.min() < 0.0 or scores.max() > 1.0:
        raise ValueError("Scores must be probabilities in [0, 1]")

    if len(np.unique(truth)) < 2:
        raise DegenerateLabelSetError(
            f"AUC is undefined: truth holds only class {int(truth[0])}"
        )

    predicted = (scores >= threshold).astype(int)
    # Fixed label order keeps benign as row/column 0 and malignant as 1
    tn, fp, fn, tp = confusion_matrix(truth, predicted, labels=[0, POSITIVE_CLASS]).ravel()

    return EvaluationResult(
        tp=int(tp),
        tn=int(tn),
        fp=int(fp),
        fn=int(fn),
        # Rank-based ROC area, ties counted as one half
        auc=float(roc_auc_score(truth, scores)),
        threshold=threshold,
    )
